"""Recipe for OpenWrt."""

from __future__ import annotations

from ..recipe import (
    UPSTREAM,
    Capability,
    ChangeType,
    Feature,
    MirrorSite,
    Plan,
    RunOption,
    Source,
    Target,
)
from .apt_common import ALI, MIRRORZ, SJTUG_ZHIYUAN, SUSTECH, TENCENT, TUNA, USTC

OPENWRT_DISTFEEDS = "/etc/opkg/distfeeds.conf"

PKU = MirrorSite("pku", "PKU", "北京大学开源镜像站")

OPENWRT_SOURCES = (
    Source(UPSTREAM, "https://downloads.openwrt.org"),
    Source(MIRRORZ, "https://mirrors.cernet.edu.cn/openwrt"),
    Source(ALI, "https://mirrors.aliyun.com/openwrt"),
    Source(TENCENT, "https://mirrors.cloud.tencent.com/openwrt"),
    Source(TUNA, "https://mirror.tuna.tsinghua.edu.cn/openwrt"),
    Source(SJTUG_ZHIYUAN, "https://mirror.sjtu.edu.cn/openwrt"),
    Source(USTC, "https://mirrors.ustc.edu.cn/openwrt"),
    Source(PKU, "https://mirrors.pku.edu.cn/openwrt"),
    Source(SUSTECH, "https://mirrors.sustech.edu.cn/openwrt"),
)


def openwrt_getsrc(host) -> Plan:
    """Show the opkg feed configuration."""
    plan = Plan()
    plan.view(OPENWRT_DISTFEEDS)
    return plan


def openwrt_setsrc(host, source: Source, reset: bool = False) -> Plan:
    """Point opkg's release feeds at ``source`` and refresh the index."""
    plan = Plan()
    plan.ensure_root()
    plan.backup(OPENWRT_DISTFEEDS)
    plan.run(
        f"sed -E -i 's@https?://.*/releases@{source.url}/releases@g' {OPENWRT_DISTFEEDS}",
        RunOption.NO_LAST_NEW_LINE,
    )
    plan.run("opkg update", RunOption.NO_LAST_NEW_LINE)
    plan.change_type = ChangeType.RESET if reset else ChangeType.AUTO
    plan.source = source
    return plan


def openwrt_resetsrc(host, source: Source) -> Plan:
    """Restore opkg's feeds to ``source``; the same steps as setting them."""
    return openwrt_setsrc(host, source, reset=True)


OPENWRT = Target(
    "openwrt",
    OPENWRT_SOURCES,
    openwrt_setsrc,
    getsrc=openwrt_getsrc,
    resetsrc=openwrt_resetsrc,
    feature=Feature(
        can_get=True,
        can_reset=True,
        cap_locally=Capability.CAN_NOT,
        can_english=True,
        can_user_define=True,
    ),
)