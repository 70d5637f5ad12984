"""Recipe for TeX Live (tlmgr) and MiKTeX (mpm)."""

from __future__ import annotations

from ..recipe import UPSTREAM, ChangeType, Plan, RecipeError, Source, Target
from ..strutil import delete_suffix
from .apt_common import BFSU, JLU, SJTUG_ZHIYUAN, SUSTECH, TUNA
from .yum import LZUOSS

TEX_SOURCES = (
    Source(UPSTREAM, None),
    Source(SJTUG_ZHIYUAN, "https://mirrors.sjtug.sjtu.edu.cn/ctan/systems/texlive/tlnet"),
    Source(TUNA, "https://mirrors.tuna.tsinghua.edu.cn/CTAN/systems/texlive/tlnet"),
    Source(BFSU, "https://mirrors.bfsu.edu.cn/CTAN/systems/texlive/tlnet"),
    Source(LZUOSS, "https://mirror.lzu.edu.cn/CTAN/systems/texlive/tlnet"),
    Source(JLU, "https://mirrors.jlu.edu.cn/CTAN/systems/texlive/tlnet"),
    Source(SUSTECH, "https://mirrors.sustech.edu.cn/CTAN/systems/texlive/tlnet"),
)


def _installed_managers(host) -> tuple[bool, bool]:
    """Whether tlmgr and mpm exist; at least one of them must."""
    tlmgr = host.program_exists("tlmgr")
    mpm = host.program_exists("mpm")
    if not tlmgr and not mpm:
        raise RecipeError("未找到 tlmgr 或 mpm 命令，请检查是否存在（其一）")
    return tlmgr, mpm


def tex_getsrc(host) -> Plan:
    """Show the repository of each installed TeX package manager."""
    tlmgr, mpm = _installed_managers(host)
    plan = Plan()
    if tlmgr:
        plan.run("tlmgr option repository")
    if mpm:
        plan.run("mpm --get-repository")
    return plan


def tex_setsrc(host, source: Source) -> Plan:
    """Point tlmgr and/or mpm at ``source``."""
    tlmgr, mpm = _installed_managers(host)
    plan = Plan()
    if tlmgr:
        plan.run(f"tlmgr option repository {source.url}")
    if mpm:
        miktex_url = delete_suffix(source.url, "texlive/tlnet") + "win32/miktex/tm/packages/"
        plan.run(f"mpm --set-repository={miktex_url}")
    plan.change_type = ChangeType.UNTESTED
    plan.source = source
    return plan


TEX = Target("tex", TEX_SOURCES, tex_setsrc, getsrc=tex_getsrc)