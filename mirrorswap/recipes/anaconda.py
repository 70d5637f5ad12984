"""Recipe for Anaconda channels."""

from __future__ import annotations

from ..osutil import Platform
from ..recipe import UPSTREAM, ChangeType, MirrorSite, Plan, RecipeError, Source, Target
from .apt_common import BFSU, BJTU, NJU, SJTUG_ZHIYUAN, TUNA, ZJU
from .openwrt import PKU

NJTECH = MirrorSite("njtech", "NJTech", "南京工业大学开源软件镜像站")

# Channel paths are completed from these base URLs.
ANACONDA_SOURCES = (
    Source(UPSTREAM, "https://repo.anaconda.com/"),
    Source(NJU, "https://mirror.nju.edu.cn/anaconda/"),
    Source(BJTU, "https://mirror.bjtu.edu.cn/anaconda/"),
    Source(TUNA, "https://mirrors.tuna.tsinghua.edu.cn/anaconda/"),
    Source(BFSU, "https://mirrors.bfsu.edu.cn/anaconda/"),
    Source(ZJU, "https://mirrors.zju.edu.cn/anaconda/"),
    Source(SJTUG_ZHIYUAN, "https://mirror.sjtu.edu.cn/anaconda"),
    Source(PKU, "https://mirrors.pku.edu.cn/anaconda/"),
    Source(NJTECH, "https://mirrors.njtech.edu.cn/anaconda/"),
)

_CUSTOM_CHANNELS = (
    "conda-forge",
    "msys2",
    "bioconda",
    "menpo",
    "pytorch",
    "pytorch-lts",
    "simpleitk",
    "deepmodeling",
)


def condarc_content(url: str) -> str:
    """The ``.condarc`` text that routes conda's channels through ``url``."""
    cloud = url + "cloud"
    defaults = "".join(f"\n  - {url}pkgs/{name}" for name in ("main", "r", "msys2"))
    custom = "\n".join(f"  {name}: {cloud}" for name in _CUSTOM_CHANNELS)
    return (
        "channels:\n  - defaults\n"
        "show_channel_urls: true\ndefault_channels:"
        f"{defaults}\ncustom_channels:\n{custom}"
    )


def anaconda_setsrc(host, source: Source) -> Plan:
    """Show the ``.condarc`` content the user should add for ``source``."""
    plan = Plan()
    content = condarc_content(source.url)
    home = host.home if host.home is not None else "~"
    config = home + "/.condarc"

    if host.platform is Platform.WINDOWS:
        if not host.program_exists("conda"):
            raise RecipeError("未找到 conda 命令，请检查是否存在")
        plan.run("conda config --set show_channel_urls yes")

    plan.note(f"请向 {config} 中手动添加:")
    plan.echo(content)
    plan.note("然后运行 conda clean -i 清除索引缓存，保证用的是镜像站提供的索引")
    plan.change_type = ChangeType.SEMI_AUTO
    plan.source = source
    return plan


ANACONDA = Target("anaconda", ANACONDA_SOURCES, anaconda_setsrc)