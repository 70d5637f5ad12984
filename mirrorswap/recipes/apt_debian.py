"""Recipes for Debian, Armbian and Kali Linux."""

from __future__ import annotations

from ..recipe import (
    UPSTREAM,
    Capability,
    ChangeType,
    Feature,
    Plan,
    RunOption,
    Source,
    Target,
)
from .apt_common import (
    ALI,
    APT_SOURCELIST,
    ARMBIAN_SOURCELIST,
    BFSU,
    DEBIAN_SOURCELIST_DEB822,
    HUAWEI,
    MIRRORZ,
    NETEASE,
    NJU,
    SJTUG_ZHIYUAN,
    SOHU,
    SUSTECH,
    TENCENT,
    TUNA,
    USTC,
    VOLCENGINE,
    DebianType,
    ensure_apt_sourcelist,
)

DEBIAN_SOURCES = (
    Source(UPSTREAM, "http://deb.debian.org/debian"),
    Source(MIRRORZ, "https://mirrors.cernet.edu.cn/debian/"),
    Source(ALI, "https://mirrors.aliyun.com/debian"),
    Source(VOLCENGINE, "https://mirrors.volces.com/debian"),
    Source(BFSU, "https://mirrors.bfsu.edu.cn/debian"),
    Source(USTC, "https://mirrors.ustc.edu.cn/debian"),
    Source(TUNA, "https://mirrors.tuna.tsinghua.edu.cn/debian"),
    Source(TENCENT, "https://mirrors.tencent.com/debian"),
    Source(NETEASE, "https://mirrors.163.com/debian"),
    Source(SOHU, "https://mirrors.sohu.com/debian"),
)

ARMBIAN_SOURCES = (
    Source(UPSTREAM, "http://apt.armbian.com"),
    Source(MIRRORZ, "https://mirrors.cernet.edu.cn/armbian"),
    Source(TUNA, "https://mirrors.tuna.tsinghua.edu.cn/armbian"),
    Source(SJTUG_ZHIYUAN, "https://mirror.sjtu.edu.cn/armbian"),
    Source(BFSU, "https://mirrors.bfsu.edu.cn/armbian"),
    Source(SUSTECH, "https://mirrors.sustech.edu.cn/armbian"),
    Source(USTC, "https://mirrors.ustc.edu.cn/armbian"),
    Source(NJU, "https://mirrors.nju.edu.cn/armbian"),
    Source(ALI, "https://mirrors.aliyun.com/armbian"),
)

KALI_SOURCES = (
    Source(UPSTREAM, "http://http.kali.org/kali"),
    Source(MIRRORZ, "https://mirrors.cernet.edu.cn/kali"),
    Source(ALI, "https://mirrors.aliyun.com/kali"),
    Source(VOLCENGINE, "https://mirrors.volces.com/kali"),
    Source(BFSU, "https://mirrors.bfsu.edu.cn/kali"),
    Source(USTC, "https://mirrors.ustc.edu.cn/kali"),
    Source(TUNA, "https://mirrors.tuna.tsinghua.edu.cn/kali"),
    Source(TENCENT, "https://mirrors.tencent.com/kali"),
    Source(HUAWEI, "https://mirrors.huaweicloud.com/kali"),
    Source(NETEASE, "https://mirrors.163.com/kali"),
    Source(SOHU, "https://mirrors.sohu.com/kali"),
)

_HTTPS_HINT = "如果遇到无法拉取 HTTPS 源的情况，我们会使用 HTTP 源并需要您运行:"
_HTTPS_PACKAGES = "apt install apt-transport-https ca-certificates"


def debian_getsrc(host) -> Plan:
    """Show the Debian source configuration, preferring the DEB822 file."""
    plan = Plan()
    for path in (DEBIAN_SOURCELIST_DEB822, APT_SOURCELIST):
        if host.file_exists(path):
            plan.view(path)
            return plan
    plan.error("缺少源配置文件！但仍可直接通过 set debian 来添加使用新的源")
    return plan


def _debian_deb822(plan: Plan, source: Source) -> None:
    plan.note(_HTTPS_HINT)
    plan.echo(_HTTPS_PACKAGES)
    plan.backup(DEBIAN_SOURCELIST_DEB822)
    plan.run(
        f"sed -E -i 's@https?://.*/debian/?@{source.url}@g' {DEBIAN_SOURCELIST_DEB822}"
    )
    # debian-security lives at a different path from the main archive.
    plan.run(
        f"sed -E -i 's@https?://.*/debian-security/?@{source.url}-security@g' "
        f"{DEBIAN_SOURCELIST_DEB822}"
    )
    plan.run("apt update", RunOption.NO_LAST_NEW_LINE)


def debian_setsrc(host, source: Source) -> Plan:
    """Point Debian's apt sources at ``source``."""
    plan = Plan()
    plan.ensure_root()
    if host.file_exists(DEBIAN_SOURCELIST_DEB822):
        plan.note("将基于新格式换源")
        _debian_deb822(plan, source)
    else:
        # Docker images may lack the file; a generated one is not backed up.
        existed = ensure_apt_sourcelist(plan, host, DebianType.DEBIAN)
        plan.note(_HTTPS_HINT)
        plan.echo(_HTTPS_PACKAGES)
        if existed:
            plan.backup(APT_SOURCELIST)
        plan.run(f"sed -E -i 's@https?://.*/debian/?@{source.url}@g' {APT_SOURCELIST}")
        plan.run("apt update", RunOption.NO_LAST_NEW_LINE)
    plan.change_type = ChangeType.AUTO
    plan.source = source
    return plan


def armbian_getsrc(host, english: bool = False) -> Plan:
    """Show the Armbian source list."""
    plan = Plan()
    if host.file_exists(ARMBIAN_SOURCELIST):
        plan.view(ARMBIAN_SOURCELIST)
    elif english:
        plan.error("Source list config file missing! Path: " + ARMBIAN_SOURCELIST)
    else:
        plan.error("缺少源配置文件！路径：" + ARMBIAN_SOURCELIST)
    return plan


def armbian_setsrc(host, source: Source) -> Plan:
    """Point Armbian's apt source at ``source``."""
    plan = Plan()
    plan.ensure_root()
    plan.backup(ARMBIAN_SOURCELIST)
    plan.run(
        f"sed -E -i 's@https?[^ ]*armbian/?[^ ]*@{source.url}@g' {ARMBIAN_SOURCELIST}"
    )
    plan.run("apt update", RunOption.NO_LAST_NEW_LINE)
    plan.change_type = ChangeType.AUTO
    plan.source = source
    return plan


def kali_getsrc(host) -> Plan:
    """Show the Kali apt source list."""
    plan = Plan()
    plan.view(APT_SOURCELIST)
    return plan


def kali_setsrc(host, source: Source) -> Plan:
    """Point Kali Linux's apt sources at ``source``."""
    plan = Plan()
    plan.ensure_root()
    plan.backup(APT_SOURCELIST)
    plan.run(f"sed -E -i 's@https?://.*/kali/?@{source.url}@g' {APT_SOURCELIST}")
    plan.run("apt update", RunOption.NO_LAST_NEW_LINE)
    plan.change_type = ChangeType.UNTESTED
    plan.source = source
    return plan


DEBIAN = Target(
    "debian",
    DEBIAN_SOURCES,
    debian_setsrc,
    getsrc=debian_getsrc,
    feature=Feature(
        can_get=True,
        can_reset=False,
        cap_locally=Capability.CAN_NOT,
        can_english=False,
        can_user_define=True,
    ),
)

ARMBIAN = Target(
    "armbian",
    ARMBIAN_SOURCES,
    armbian_setsrc,
    getsrc=armbian_getsrc,
    feature=Feature(
        can_get=True,
        can_reset=False,
        cap_locally=Capability.CAN_NOT,
        can_english=True,
        can_user_define=True,
    ),
)

KALI = Target("kali", KALI_SOURCES, kali_setsrc, getsrc=kali_getsrc)