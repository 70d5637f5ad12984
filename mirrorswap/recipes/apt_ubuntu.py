"""Recipes for Ubuntu and Linux Mint."""

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
from .apt_common import (
    ALI,
    APT_SOURCELIST,
    BFSU,
    BJTU,
    HUAWEI,
    ISCAS,
    JLU,
    LINUXMINT_SOURCELIST,
    MIRRORZ,
    NETEASE,
    SCAU,
    SJTUG_ZHIYUAN,
    SOHU,
    SUSTECH,
    TENCENT,
    TUNA,
    UBUNTU_SOURCELIST_DEB822,
    USTC,
    VOLCENGINE,
    ZJU,
    DebianType,
    ensure_apt_sourcelist,
)

UPSTREAM_UBUNTU = MirrorSite(
    "upstream",
    "archive.ubuntu.com",
    "上游默认源 archive.ubuntu.com",
    "http://archive.ubuntu.com/",
    "http://archive.ubuntu.com/ubuntu/dists/noble/Contents-amd64.gz",
)

UBUNTU_SOURCES = (
    Source(UPSTREAM_UBUNTU, "http://archive.ubuntu.com/ubuntu/"),
    Source(MIRRORZ, "https://mirrors.cernet.edu.cn/ubuntu/"),
    Source(ALI, "https://mirrors.aliyun.com/ubuntu"),
    Source(VOLCENGINE, "https://mirrors.volces.com/ubuntu"),
    Source(BFSU, "https://mirrors.bfsu.edu.cn/ubuntu"),
    Source(USTC, "https://mirrors.ustc.edu.cn/ubuntu"),
    Source(TUNA, "https://mirrors.tuna.tsinghua.edu.cn/ubuntu"),
    Source(TENCENT, "https://mirrors.tencent.com/ubuntu"),
    Source(HUAWEI, "https://mirrors.huaweicloud.com/ubuntu"),
    Source(NETEASE, "https://mirrors.163.com/ubuntu"),
    Source(SOHU, "https://mirrors.sohu.com/ubuntu"),
)

LINUXMINT_SOURCES = (
    Source(UPSTREAM, None),
    Source(MIRRORZ, "https://mirrors.cernet.edu.cn/linuxmint/"),
    Source(ALI, "http://mirrors.aliyun.com/linuxmint-packages/"),
    Source(TUNA, "https://mirrors.tuna.tsinghua.edu.cn/linuxmint/"),
    Source(BFSU, "https://mirrors.bfsu.edu.cn/linuxmint/"),
    Source(SJTUG_ZHIYUAN, "https://mirror.sjtu.edu.cn/linuxmint/"),
    Source(JLU, "https://mirrors.jlu.edu.cn/linuxmint/"),
    Source(USTC, "https://mirrors.ustc.edu.cn/linuxmint/"),
    Source(BJTU, "https://mirror.bjtu.edu.cn/linuxmint/"),
    Source(ZJU, "https://mirrors.zju.edu.cn/linuxmint/"),
    Source(SUSTECH, "https://mirrors.sustech.edu.cn/linuxmint/"),
    Source(ISCAS, "https://mirror.iscas.ac.cn/linuxmint/"),
    Source(SCAU, "https://mirrors.scau.edu.cn/linuxmint/"),
    Source(NETEASE, "https://mirrors.163.com/linuxmint/packages/"),
)


def ubuntu_getsrc(host, english: bool = False) -> Plan:
    """Show the Ubuntu source configuration, preferring the DEB822 file."""
    plan = Plan()
    for path in (UBUNTU_SOURCELIST_DEB822, APT_SOURCELIST):
        if host.file_exists(path):
            plan.view(path)
            return plan
    plan.error(
        "Source config file missing! However, you can still run `set ubuntu` "
        "to add and use new sources"
        if english
        else "缺少源配置文件！但仍可直接通过 set ubuntu 来添加使用新的源"
    )
    return plan


def _ubuntu_sed(host, url: str, path: str) -> str:
    # Non-x86 architectures are served from ubuntu-ports.
    if host.cpu_arch().startswith("x86_64"):
        return f"sed -E -i 's@https?://.*/ubuntu/?@{url}@g' {path}"
    return f"sed -E -i 's@https?://.*/ubuntu-ports/?@{url}-ports@g' {path}"


def ubuntu_setsrc(host, source: Source, english: bool = False) -> Plan:
    """Point Ubuntu's apt sources at ``source``."""
    plan = Plan()
    plan.ensure_root()
    if host.file_exists(UBUNTU_SOURCELIST_DEB822):
        plan.note("Will change source based on new format" if english else "将基于新格式换源")
        plan.backup(UBUNTU_SOURCELIST_DEB822)
        path = UBUNTU_SOURCELIST_DEB822
    else:
        # A generated list is not worth backing up.
        if ensure_apt_sourcelist(plan, host, DebianType.UBUNTU, english):
            plan.backup(APT_SOURCELIST)
        path = APT_SOURCELIST
    plan.run(_ubuntu_sed(host, source.url, path))
    plan.run("apt update", RunOption.NO_LAST_NEW_LINE)
    plan.change_type = ChangeType.AUTO
    plan.source = source
    return plan


def ubuntu_resetsrc(host, source: Source, english: bool = False) -> Plan:
    """Restore Ubuntu's sources; the same steps as setting them."""
    return ubuntu_setsrc(host, source, english)


def linuxmint_getsrc(host) -> Plan:
    """Show the Linux Mint package repository list."""
    plan = Plan()
    plan.view(LINUXMINT_SOURCELIST)
    return plan


def linuxmint_setsrc(host, source: Source) -> Plan:
    """Point Linux Mint's package repositories at ``source``."""
    plan = Plan()
    plan.ensure_root()
    plan.backup(LINUXMINT_SOURCELIST)
    plan.run(f"sed -E -i 's@https?://.*/.*/?@{source.url}@g' {LINUXMINT_SOURCELIST}")
    plan.run("apt update", RunOption.NO_LAST_NEW_LINE)
    plan.change_type = ChangeType.AUTO
    plan.source = source
    plan.warn(
        "完成后请不要再使用 mintsources（自带的图形化软件源设置工具）进行任何操作，"
        "因为在操作后，无论是否有按“确定”，mintsources 均会覆写我们刚才换源的内容"
    )
    return plan


UBUNTU = Target(
    "ubuntu",
    UBUNTU_SOURCES,
    ubuntu_setsrc,
    getsrc=ubuntu_getsrc,
    resetsrc=ubuntu_resetsrc,
    feature=Feature(
        can_get=True,
        can_reset=True,
        cap_locally=Capability.CAN_NOT,
        can_english=True,
        can_user_define=True,
    ),
)

LINUXMINT = Target("linuxmint", LINUXMINT_SOURCES, linuxmint_setsrc, getsrc=linuxmint_getsrc)