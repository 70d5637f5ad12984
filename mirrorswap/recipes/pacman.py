"""Recipes for Arch Linux, Arch Linux CN, MSYS2 and Manjaro."""

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
from .apt_common import ALI, BFSU, HUAWEI, NETEASE, SOHU, TENCENT, TUNA, USTC

PACMAN_MIRRORLIST = "/etc/pacman.d/mirrorlist"

MSYS2_MIRRORLISTS = (
    "/etc/pacman.d/mirrorlist.mingw32",
    "/etc/pacman.d/mirrorlist.mingw64",
    "/etc/pacman.d/mirrorlist.msys",
)

# User ID of the key that signs the archlinuxcn keyring package.
ARCHLINUXCN_SIGNER = "farseerfc"

# No trailing slash: ARM mirrors add an "arm" suffix right after the URL.
ARCH_SOURCES = (
    Source(UPSTREAM, None),
    Source(ALI, "https://mirrors.aliyun.com/archlinux"),
    Source(BFSU, "https://mirrors.bfsu.edu.cn/archlinux"),
    Source(USTC, "https://mirrors.ustc.edu.cn/archlinux"),
    Source(TUNA, "https://mirrors.tuna.tsinghua.edu.cn/archlinux"),
    Source(TENCENT, "https://mirrors.tencent.com/archlinux"),
    Source(HUAWEI, "https://mirrors.huaweicloud.com/archlinux"),
    Source(NETEASE, "https://mirrors.163.com/archlinux"),
)

ARCHLINUXCN_SOURCES = (
    Source(UPSTREAM, "https://repo.archlinuxcn.org/"),
    Source(ALI, "https://mirrors.aliyun.com/archlinuxcn/"),
    Source(BFSU, "https://mirrors.bfsu.edu.cn/archlinuxcn/"),
    Source(USTC, "https://mirrors.ustc.edu.cn/archlinuxcn/"),
    Source(TUNA, "https://mirrors.tuna.tsinghua.edu.cn/archlinuxcn/"),
    Source(TENCENT, "https://mirrors.cloud.tencent.com/archlinuxcn/"),
    Source(NETEASE, "https://mirrors.163.com/archlinux-cn/"),
)

MSYS2_SOURCES = (
    Source(UPSTREAM, None),
    Source(ALI, "https://mirrors.aliyun.com/msys2"),
    Source(BFSU, "https://mirrors.bfsu.edu.cn/msys2"),
    Source(USTC, "https://mirrors.ustc.edu.cn/msys2"),
    Source(TUNA, "https://mirrors.tuna.tsinghua.edu.cn/msys2"),
    Source(TENCENT, "https://mirrors.tencent.com/msys2"),
    Source(HUAWEI, "https://mirrors.huaweicloud.com/msys2"),
    Source(NETEASE, "https://mirrors.163.com/msys2"),
    Source(SOHU, "https://mirrors.sohu.com/msys2"),
)


def _view_mirrorlist() -> Plan:
    plan = Plan()
    plan.view(PACMAN_MIRRORLIST)
    return plan


def arch_getsrc(host) -> Plan:
    """Show the pacman mirror list."""
    return _view_mirrorlist()


def arch_setsrc(host, source: Source) -> Plan:
    """Put ``source`` at the top of the pacman mirror list and resync."""
    plan = Plan()
    plan.ensure_root()
    plan.backup(PACMAN_MIRRORLIST)
    is_x86 = host.cpu_arch().startswith("x86_64")
    if is_x86:
        server = f"Server = {source.url}/$repo/os/$arch"
    else:
        server = f"Server = {source.url}arm/$arch/$repo"
    # Earlier entries take priority.
    plan.prepend(server, PACMAN_MIRRORLIST)
    plan.run("pacman -Syyu" if is_x86 else "pacman -Syy", RunOption.NO_LAST_NEW_LINE)
    plan.change_type = ChangeType.AUTO
    plan.source = source
    return plan


def archlinuxcn_getsrc(host) -> Plan:
    """Show the pacman mirror list."""
    return _view_mirrorlist()


def archlinuxcn_setsrc(host, source: Source) -> Plan:
    """Add the Arch Linux CN repository served by ``source``."""
    plan = Plan()
    plan.ensure_root()
    plan.backup(PACMAN_MIRRORLIST)
    plan.prepend(f"[archlinuxcn]\nServer = {source.url}$arch", PACMAN_MIRRORLIST)
    plan.run(
        f'pacman-key --lsign-key "{ARCHLINUXCN_SIGNER}"', RunOption.DONT_ABORT_ON_FAILURE
    )
    plan.run("pacman -Sy archlinuxcn-keyring")
    plan.run("pacman -Syy", RunOption.NO_LAST_NEW_LINE)
    plan.change_type = ChangeType.UNTESTED
    plan.source = source
    return plan


def msys2_setsrc(host, source: Source) -> Plan:
    """Point the MSYS2 mirror lists at ``source``."""
    plan = Plan()
    for path in MSYS2_MIRRORLISTS:
        plan.backup(path)
    plan.note(f"请针对你的架构下载安装此目录下的文件:{source.url}distrib/<架构>/")
    plan.run(
        f'sed -i "s#https?://mirror.msys2.org/#{source.url}#g" /etc/pacman.d/mirrorlist* '
    )
    plan.change_type = ChangeType.UNTESTED
    plan.source = source
    return plan


def manjaro_setsrc(host) -> Plan:
    """Let pacman-mirrors rank the Chinese mirrors, then resync."""
    plan = Plan()
    plan.ensure_root()
    plan.run("pacman-mirrors -i -c China -m rank")
    plan.run("pacman -Syy", RunOption.NO_LAST_NEW_LINE)
    plan.change_type = ChangeType.AUTO
    plan.source = None
    return plan


ARCH = Target(
    "arch",
    ARCH_SOURCES,
    arch_setsrc,
    getsrc=arch_getsrc,
    feature=Feature(
        can_get=True,
        can_reset=False,
        cap_locally=Capability.CAN_NOT,
        can_english=True,
        can_user_define=True,
        note="可额外使用 set archlinuxcn 来更换 Arch Linux CN Repository 源",
    ),
)

ARCHLINUXCN = Target(
    "archlinuxcn",
    ARCHLINUXCN_SOURCES,
    archlinuxcn_setsrc,
    getsrc=archlinuxcn_getsrc,
    feature=Feature(
        can_get=True,
        can_reset=False,
        cap_locally=Capability.CAN_NOT,
        can_english=True,
        can_user_define=True,
        note="可额外使用 set arch 来更换 Arch Linux 源",
    ),
)

MSYS2 = Target("msys2", MSYS2_SOURCES, msys2_setsrc)

MANJARO = Target("manjaro", (), manjaro_setsrc)