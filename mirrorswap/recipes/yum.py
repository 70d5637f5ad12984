"""Recipes for AlmaLinux, Anolis OS, Fedora, Rocky Linux and openEuler."""

from __future__ import annotations

import re

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
    BFSU,
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
    ZJU,
    ETC_OS_RELEASE,
)

YUM_SOURCELIST_D = "/etc/yum.repos.d/"
OPENEULER_SOURCELIST = "openEuler.repo"

FEDORA_REPOS = (
    YUM_SOURCELIST_D + "fedora.repo",
    YUM_SOURCELIST_D + "fedora-updates.repo",
)

ROCKY_VERSION_COMMAND = (
    r"""sed -nr 's/ROCKY_SUPPORT_PRODUCT_VERSION="(.*)"/\1/p' """ + ETC_OS_RELEASE
)

HUST = MirrorSite("hust", "HUST", "华中科技大学开源镜像站")
LZUOSS = MirrorSite("lzuoss", "Lzuoss", "兰州大学开源社区镜像站")

ALMALINUX_SOURCES = (
    Source(UPSTREAM, "http://repo.almalinux.org/almalinux"),
    Source(ALI, "https://mirrors.aliyun.com/almalinux"),
    Source(VOLCENGINE, "https://mirrors.volces.com/almalinux"),
    Source(SJTUG_ZHIYUAN, "https://mirrors.sjtug.sjtu.edu.cn/almalinux"),
    Source(ZJU, "https://mirrors.zju.edu.cn/almalinux"),
    Source(NJU, "https://mirror.nju.edu.cn/almalinux"),
)

ANOLIS_SOURCES = (
    Source(UPSTREAM, None),
    Source(ALI, "https://mirrors.aliyun.com/anolis"),
    Source(HUST, "https://mirrors.hust.edu.cn/anolis"),
)

FEDORA_SOURCES = (
    Source(UPSTREAM, "http://download.example/pub/fedora/linux"),
    Source(ALI, "https://mirrors.aliyun.com/fedora"),
    Source(BFSU, "https://mirrors.bfsu.edu.cn/fedora"),
    Source(USTC, "https://mirrors.ustc.edu.cn/fedora"),
    Source(TUNA, "https://mirrors.tuna.tsinghua.edu.cn/fedora"),
    Source(TENCENT, "https://mirrors.tencent.com/fedora"),
    Source(NETEASE, "https://mirrors.163.com/fedora"),
    Source(SOHU, "https://mirrors.sohu.com/fedora"),
)

ROCKYLINUX_SOURCES = (
    Source(UPSTREAM, None),
    Source(MIRRORZ, "https://mirrors.cernet.edu.cn/rocky"),
    Source(ALI, "https://mirrors.aliyun.com/rockylinux"),
    Source(VOLCENGINE, "https://mirrors.volces.com/rockylinux"),
    Source(SJTUG_ZHIYUAN, "https://mirror.sjtu.edu.cn/rocky"),
    Source(SUSTECH, "https://mirrors.sustech.edu.cn/rocky-linux"),
    Source(ZJU, "https://mirrors.zju.edu.cn/rocky"),
    Source(LZUOSS, "https://mirror.lzu.edu.cn/rocky"),
    Source(SOHU, "https://mirrors.sohu.com/Rocky"),
    Source(NETEASE, "https://mirrors.163.com/rocky"),
)

OPENEULER_SOURCES = (
    Source(UPSTREAM, "https://repo.openeuler.org/"),
    Source(ALI, "https://mirrors.aliyun.com/openeuler/"),
    Source(BFSU, "https://mirrors.bfsu.edu.cn/openeuler/"),
    Source(USTC, "https://mirrors.ustc.edu.cn/openeuler/"),
    Source(TUNA, "https://mirrors.tuna.tsinghua.edu.cn/openeuler/"),
    Source(TENCENT, "https://mirrors.tencent.com/openeuler/"),
    Source(NETEASE, "https://mirrors.163.com/openeuler/"),
    Source(SOHU, "https://mirrors.sohu.com/openeuler/"),
)

_NUMBER = re.compile(r"\s*([+-]?(?:\d+(?:\.\d*)?|\.\d+))")


def _version(text: str | None) -> float:
    """Number at the start of ``text``; 0.0 when there is none."""
    if text is None:
        return 0.0
    match = _NUMBER.match(text)
    return float(match.group(1)) if match else 0.0


def _finish(plan: Plan, source: Source | None, change_type: ChangeType) -> Plan:
    plan.change_type = change_type
    plan.source = source
    return plan


def almalinux_setsrc(host, source: Source) -> Plan:
    """Switch AlmaLinux repositories from mirrorlist to ``source``."""
    plan = Plan()
    plan.ensure_root()
    plan.run(
        "sed -e 's|^mirrorlist=|#mirrorlist=|g' "
        r"-e 's|^#\s*baseurl=https://repo.almalinux.org/almalinux|baseurl="
        f"{source.url}|g'  -i.bak  /etc/yum.repos.d/almalinux*.repo"
    )
    plan.run("dnf makecache", RunOption.NO_LAST_NEW_LINE)
    return _finish(plan, source, ChangeType.AUTO)


def anolis_setsrc(host, source: Source) -> Plan:
    """Point Anolis OS repositories at ``source``."""
    plan = Plan()
    plan.ensure_root()
    plan.run(
        r"sed -i.bak -E 's|https?://(mirrors\.openanolis\.cn/anolis)|"
        f"{source.url}|g' /etc/yum.repos.d/*.repo"
    )
    plan.run("dnf makecache")
    plan.run("dnf update", RunOption.NO_LAST_NEW_LINE)
    return _finish(plan, source, ChangeType.UNTESTED)


def fedora_setsrc(host, source: Source, reset: bool = False) -> Plan:
    """Enable baseurl in Fedora's repositories and point it at ``source``."""
    plan = Plan()
    plan.ensure_root()
    plan.note("Fedora 38 及以下版本暂不支持")
    for repo in FEDORA_REPOS:
        plan.backup(repo)
    repos = " ".join(FEDORA_REPOS)
    plan.run(f"sed -i 's|^#baseurl=|baseurl=|g' {repos}")
    # Rewrites baseurl=<URL>/releases/... and baseurl=<URL>/updates/...
    plan.run(
        "sed -i -E 's!^baseurl=.*?/(releases|updates)/!baseurl="
        f"{source.url}" r"/\1/!g' " f"{repos}"
    )
    plan.note(
        "已为您更换baseurl, 但fedora默认会优先使用metalink来匹配最快的源, "
        "如您在获取metadata时速度较慢可自行将其注释:"
    )
    for number, repo in enumerate(FEDORA_REPOS, start=1):
        plan.log(f"({number}) {repo}")
    plan.run("dnf makecache", RunOption.NO_LAST_NEW_LINE)
    return _finish(plan, source, ChangeType.RESET if reset else ChangeType.AUTO)


def fedora_resetsrc(host, source: Source) -> Plan:
    """Restore Fedora's repositories to ``source``."""
    return fedora_setsrc(host, source, reset=True)


def rockylinux_setsrc(host, source: Source) -> Plan:
    """Switch Rocky Linux repositories from mirrorlist to ``source``."""
    plan = Plan()
    plan.ensure_root()
    version = _version(host.command_output(ROCKY_VERSION_COMMAND))
    if version < 9:
        files = "/etc/yum.repos.d/Rocky-*.repo"
    else:
        files = "/etc/yum.repos.d/rocky-extras.repo /etc/yum.repos.d/rocky.repo"
    plan.run(
        "sed -e 's|^mirrorlist=|#mirrorlist=|g' "
        "-e 's|^#baseurl=http://dl.rockylinux.org/$contentdir|baseurl="
        f"{source.url}|g' -i.bak {files}"
    )
    plan.run("dnf makecache", RunOption.NO_LAST_NEW_LINE)
    return _finish(plan, source, ChangeType.AUTO)


def openeuler_setsrc(host, source: Source) -> Plan:
    """Rewrite the openEuler repository file for ``source``."""
    plan = Plan()
    plan.ensure_root()
    plan.backup(OPENEULER_SOURCELIST)
    plan.overwrite(
        f"s#http://repo.openeuler.org#{source.url}#'< /etc/yum.repos.d/openEuler.repo.bak",
        OPENEULER_SOURCELIST,
    )
    plan.run("dnf makecache", RunOption.NO_LAST_NEW_LINE)
    return _finish(plan, source, ChangeType.AUTO)


ALMALINUX = Target("almalinux", ALMALINUX_SOURCES, almalinux_setsrc)

ANOLIS = Target("anolis", ANOLIS_SOURCES, anolis_setsrc)

FEDORA = Target(
    "fedora",
    FEDORA_SOURCES,
    fedora_setsrc,
    resetsrc=fedora_resetsrc,
    feature=Feature(
        can_get=False,
        can_reset=True,
        cap_locally=Capability.CAN_NOT,
        can_english=False,
        can_user_define=True,
    ),
)

ROCKYLINUX = Target("rockylinux", ROCKYLINUX_SOURCES, rockylinux_setsrc)

OPENEULER = Target("openeuler", OPENEULER_SOURCES, openeuler_setsrc)