"""Recipes for Linux Lite, ROS, Raspberry Pi OS, Trisquel, deepin and openKylin."""

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
    BFSU,
    HUAWEI,
    ISCAS,
    MIRRORZ,
    NETEASE,
    NJU,
    RASPBERRYPI_SOURCELIST,
    ROS_SOURCELIST,
    SJTUG_ZHIYUAN,
    SOHU,
    SUSTECH,
    TENCENT,
    TUNA,
    USTC,
)

ROS_KEY_COMMAND = (
    "apt-key adv --keyserver 'hkp://keyserver.ubuntu.com:80' "
    "--recv-key C1CF6E31E6BADE8868B172B4F42ED6FBAB17C654"
)

LINUXLITE_SOURCES = (
    Source(UPSTREAM, "http://repo.linuxliteos.com/linuxlite/"),
    Source(MIRRORZ, "https://mirrors.cernet.edu.cn/linuxliteos/"),
    Source(SJTUG_ZHIYUAN, "https://mirrors.sjtug.sjtu.edu.cn/linuxliteos/"),
    Source(NJU, "https://mirror.nju.edu.cn/linuxliteos/"),
)

ROS_SOURCES = (
    Source(UPSTREAM, None),
    Source(ALI, "https://mirrors.aliyun.com"),
    Source(BFSU, "https://mirrors.bfsu.edu.cn"),
    Source(USTC, "https://mirrors.ustc.edu.cn"),
    Source(TUNA, "https://mirrors.tuna.tsinghua.edu.cn"),
    Source(TENCENT, "https://mirrors.tencent.com"),
    Source(HUAWEI, "https://mirrors.huaweicloud.com"),
    Source(NETEASE, "https://mirrors.163.com"),
    Source(SOHU, "https://mirrors.sohu.com"),
)

RASPBERRYPI_SOURCES = (
    Source(UPSTREAM, "https://archive.raspberrypi.com/"),
    Source(MIRRORZ, "https://mirrors.cernet.edu.cn/raspberrypi/"),
    Source(TUNA, "https://mirrors.tuna.tsinghua.edu.cn/raspberrypi/"),
    Source(BFSU, "https://mirrors.bfsu.edu.cn/raspberrypi/"),
    Source(USTC, "https://mirrors.ustc.edu.cn/raspberrypi/"),
    Source(SJTUG_ZHIYUAN, "https://mirrors.sjtug.sjtu.edu.cn/raspberrypi/"),
    Source(SUSTECH, "https://mirrors.sustech.edu.cn/raspberrypi/"),
)

TRISQUEL_SOURCES = (
    Source(UPSTREAM, None),
    Source(MIRRORZ, "https://mirrors.cernet.edu.cn/trisquel/"),
    Source(ALI, "https://mirrors.aliyun.com/trisquel/"),
    Source(NJU, "https://mirror.nju.edu.cn/trisquel/"),
    Source(USTC, "https://mirrors.ustc.edu.cn/trisquel/"),
    Source(ISCAS, "https://mirror.iscas.ac.cn/trisquel/"),
)

DEEPIN_SOURCES = (
    Source(UPSTREAM, "https://community-packages.deepin.com/deepin"),
    Source(ALI, "https://mirrors.aliyun.com/deepin"),
    Source(BFSU, "https://mirrors.bfsu.edu.cn/deepin"),
    Source(USTC, "https://mirrors.ustc.edu.cn/deepin"),
    Source(TUNA, "https://mirrors.tuna.tsinghua.edu.cn/deepin"),
    Source(TENCENT, "https://mirrors.tencent.com/deepin"),
    Source(NETEASE, "https://mirrors.163.com/deepin"),
    Source(SOHU, "https://mirrors.sohu.com/deepin"),
)

OPENKYLIN_SOURCES = (
    Source(UPSTREAM, "https://archive.openkylin.top/openkylin/"),
    Source(ALI, "https://mirrors.aliyun.com/openkylin/"),
    Source(NETEASE, "https://mirrors.163.com/openkylin/"),
)


def _view(path: str) -> Plan:
    plan = Plan()
    plan.view(path)
    return plan


def _sed_setsrc(
    source: Source, path: str, pattern: str, replacement: str, change_type: ChangeType
) -> Plan:
    """Back up ``path``, rewrite mirror URLs in it with sed, then refresh apt."""
    plan = Plan()
    plan.ensure_root()
    plan.backup(path)
    plan.run(f"sed -E -i 's@{pattern}@{replacement}@g' {path}")
    plan.run("apt update", RunOption.NO_LAST_NEW_LINE)
    plan.change_type = change_type
    plan.source = source
    return plan


def linuxlite_getsrc(host) -> Plan:
    """Show the Linux Lite apt source list."""
    return _view(APT_SOURCELIST)


def linuxlite_setsrc(host, source: Source) -> Plan:
    """Back up the Linux Lite source list and refresh apt."""
    plan = Plan()
    plan.ensure_root()
    plan.backup(APT_SOURCELIST)
    plan.run("apt update", RunOption.NO_LAST_NEW_LINE)
    plan.change_type = ChangeType.AUTO
    plan.source = source
    return plan


def ros_getsrc(host) -> Plan:
    """Show the ROS apt source list."""
    return _view(ROS_SOURCELIST)


def ros_setsrc(host, source: Source) -> Plan:
    """Point the ROS apt source at ``source`` and import the ROS key."""
    plan = Plan()
    plan.ensure_root()
    plan.backup(ROS_SOURCELIST)
    plan.run(
        f"sed -E -i 's@https?://.*/ros/ubuntu/?@{source.url}/ros/ubuntu@g' {ROS_SOURCELIST}"
    )
    plan.run(ROS_KEY_COMMAND)
    plan.run("apt update", RunOption.NO_LAST_NEW_LINE)
    plan.change_type = ChangeType.UNTESTED
    plan.source = source
    return plan


def raspberrypi_getsrc(host) -> Plan:
    """Show the Raspberry Pi OS source list."""
    return _view(RASPBERRYPI_SOURCELIST)


def raspberrypi_setsrc(host, source: Source) -> Plan:
    """Point Raspberry Pi OS's source list at ``source``."""
    return _sed_setsrc(
        source, RASPBERRYPI_SOURCELIST, "https?://.*/.*/?", source.url, ChangeType.UNTESTED
    )


def trisquel_getsrc(host) -> Plan:
    """Show the Trisquel apt source list."""
    return _view(APT_SOURCELIST)


def trisquel_setsrc(host, source: Source) -> Plan:
    """Point Trisquel's apt sources at ``source``."""
    return _sed_setsrc(
        source, APT_SOURCELIST, "https?://.*/trisquel/?", source.url, ChangeType.UNTESTED
    )


def deepin_getsrc(host) -> Plan:
    """Show the deepin apt source list."""
    return _view(APT_SOURCELIST)


def deepin_setsrc(host, source: Source) -> Plan:
    """Point deepin's apt sources at ``source``."""
    return _sed_setsrc(
        source, APT_SOURCELIST, "https?://.*/deepin/?", source.url, ChangeType.UNTESTED
    )


def openkylin_getsrc(host) -> Plan:
    """Show the openKylin apt source list."""
    return _view(APT_SOURCELIST)


def openkylin_setsrc(host, source: Source) -> Plan:
    """Point openKylin's apt sources at ``source``."""
    return _sed_setsrc(
        source, APT_SOURCELIST, "https?://.*/openkylin/?", source.url, ChangeType.UNTESTED
    )


LINUXLITE = Target("linuxlite", LINUXLITE_SOURCES, linuxlite_setsrc, getsrc=linuxlite_getsrc)

ROS = Target(
    "ros",
    ROS_SOURCES,
    ros_setsrc,
    getsrc=ros_getsrc,
    feature=Feature(
        can_get=True,
        can_reset=False,
        cap_locally=Capability.CAN_NOT,
        can_english=True,
        can_user_define=False,
        note="该换源方案中，URL存在拼凑，因此不能手动使用某URL来换源",
    ),
)

RASPBERRYPI = Target(
    "raspberrypi", RASPBERRYPI_SOURCES, raspberrypi_setsrc, getsrc=raspberrypi_getsrc
)

TRISQUEL = Target("trisquel", TRISQUEL_SOURCES, trisquel_setsrc, getsrc=trisquel_getsrc)

DEEPIN = Target("deepin", DEEPIN_SOURCES, deepin_setsrc, getsrc=deepin_getsrc)

OPENKYLIN = Target("openkylin", OPENKYLIN_SOURCES, openkylin_setsrc, getsrc=openkylin_getsrc)