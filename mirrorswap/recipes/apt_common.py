"""Shared paths, mirror sites and sources.list generation for apt-based systems."""

from __future__ import annotations

import re
from enum import IntEnum

from ..recipe import MirrorSite, Plan, RecipeError, UnsupportedError

APT_SOURCELIST = "/etc/apt/sources.list"
APT_SOURCELIST_D = "/etc/apt/sources.list.d/"

# Debian 12 and Ubuntu 24.04 moved to the DEB822 format.
DEBIAN_SOURCELIST_DEB822 = APT_SOURCELIST_D + "debian.sources"
UBUNTU_SOURCELIST_DEB822 = APT_SOURCELIST_D + "ubuntu.sources"

ETC_OS_RELEASE = "/etc/os-release"

ROS_SOURCELIST = APT_SOURCELIST_D + "ros-latest.list"
LINUXMINT_SOURCELIST = APT_SOURCELIST_D + "official-package-repositories.list"
ARMBIAN_SOURCELIST = APT_SOURCELIST_D + "armbian.list"
RASPBERRYPI_SOURCELIST = APT_SOURCELIST_D + "raspi.list"

GENERATOR = "mirrorswap"
# Placeholder host written into generated files; the recipe's sed replaces it.
PLACEHOLDER_URL = "https://mirrorswap.invalid"

CODENAME_COMMAND = r"sed -nr 's/VERSION_CODENAME=(.*)/\1/p' " + ETC_OS_RELEASE
VERSION_ID_COMMAND = r"""sed -nr 's/VERSION_ID="(.*)"/\1/p' """ + ETC_OS_RELEASE

# Mirror sites referred to by the apt recipes.
MIRRORZ = MirrorSite("mirrorz", "MirrorZ", "校园网联合镜像站")
TUNA = MirrorSite("tuna", "TUNA", "清华大学开源软件镜像站")
SJTUG_ZHIYUAN = MirrorSite("sjtu", "SJTUG-zhiyuan", "上海交通大学致远镜像站")
BFSU = MirrorSite("bfsu", "BFSU", "北京外国语大学开源软件镜像站")
USTC = MirrorSite("ustc", "USTC", "中国科学技术大学开源软件镜像站")
NJU = MirrorSite("nju", "NJU", "南京大学开源镜像站")
JLU = MirrorSite("jlu", "JLU", "吉林大学开源镜像站")
BJTU = MirrorSite("bjtu", "BJTU", "北京交通大学开源镜像站")
ZJU = MirrorSite("zju", "ZJU", "浙江大学开源软件镜像站")
SUSTECH = MirrorSite("sustech", "SUSTech", "南方科技大学开源软件镜像站")
ISCAS = MirrorSite("iscas", "ISCAS", "中国科学院软件研究所开源软件镜像站")
SCAU = MirrorSite("scau", "SCAU", "华南农业大学开源软件镜像站")
ALI = MirrorSite("ali", "Ali OPSX", "阿里巴巴开源镜像站")
VOLCENGINE = MirrorSite("volc", "Volcengine", "火山引擎开源软件镜像站")
TENCENT = MirrorSite("tencent", "Tencent", "腾讯软件源")
HUAWEI = MirrorSite("huawei", "Huawei Cloud", "华为开源镜像站")
NETEASE = MirrorSite("netease", "Netease", "网易开源镜像站")
SOHU = MirrorSite("sohu", "SOHU", "搜狐开源镜像站")


class DebianType(IntEnum):
    """Which apt-based family a generated sources.list is for."""

    DEBIAN = 1
    UBUNTU = 2


_LEADING_FLOAT = re.compile(r"\s*([+-]?(?:\d+(?:\.\d*)?|\.\d+))")


def _leading_float(text: str | None) -> float:
    """Numeric value at the start of ``text``; 0.0 when there is none."""
    if text is None:
        return 0.0
    match = _LEADING_FLOAT.match(text)
    return float(match.group(1)) if match else 0.0


def generate_sourcelist(
    debian_type: DebianType, codename: str, version: float, english: bool = False
) -> str:
    """Content of a sources.list for the given family, codename and version.

    Debian releases older than 10 are not supported.
    """
    base = PLACEHOLDER_URL
    if debian_type is DebianType.UBUNTU:
        components = "main restricted universe multiverse"
        return (
            f"# Generated by {GENERATOR}\n\n"
            f"deb {base}/ubuntu {codename} {components}\n"
            f"deb {base}/ubuntu {codename}-updates {components}\n"
            f"deb {base}/ubuntu {codename}-backports {components}\n"
            f"deb {base}/ubuntu {codename}-security {components}\n"
        )

    if version >= 12:
        components = "main contrib non-free non-free-firmware"
        header = f"# Generated by {GENERATOR}\n\n"
        security = f"{codename}-security"
    elif version >= 11:
        components = "main contrib non-free"
        header = f"# Generated by {GENERATOR}({base})\n\n"
        security = f"{codename}-security"
    elif version >= 10:
        components = "main contrib non-free"
        header = f"# Generated by {GENERATOR}({base})\n\n"
        security = f"{codename}/updates"
    else:
        raise UnsupportedError(
            "Your Debian version is too low (<10) to be supported"
            if english
            else "您的 Debian 版本过低 (<10)，暂不支持换源"
        )
    return (
        header
        + f"deb {base}/debian {codename} {components}\n"
        + f"deb {base}/debian {codename}-updates {components}\n"
        + f"deb {base}/debian {codename}-backports {components}\n"
        + f"deb {base}/debian-security {security} {components}\n"
    )


def ensure_apt_sourcelist(
    plan: Plan, host, debian_type: DebianType, english: bool = False
) -> bool:
    """Make sure /etc/apt/sources.list exists, generating one if needed.

    Returns whether the file already existed. When it did not, a generated
    file is written through ``plan``.
    """
    if host.file_exists(APT_SOURCELIST):
        return True
    plan.note("Will generate a new source config file" if english else "将生成新的源配置文件")

    codename = host.command_output(CODENAME_COMMAND)
    version_id = host.command_output(VERSION_ID_COMMAND)
    if not codename:
        raise RecipeError(f"cannot read VERSION_CODENAME from {ETC_OS_RELEASE}")

    content = generate_sourcelist(debian_type, codename, _leading_float(version_id), english)
    plan.overwrite(content, APT_SOURCELIST)
    return False