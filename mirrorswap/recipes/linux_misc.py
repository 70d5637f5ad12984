"""Recipes for Solus, Void Linux and openSUSE."""

from __future__ import annotations

from ..recipe import UPSTREAM, ChangeType, Plan, RunOption, Source, Target
from .apt_common import (
    ALI,
    BFSU,
    NETEASE,
    NJU,
    SJTUG_ZHIYUAN,
    SOHU,
    TENCENT,
    TUNA,
    USTC,
    VOLCENGINE,
)

XBPS_DIR = "/etc/xbps.d"
XBPS_REPOSITORY_CONFS = "/etc/xbps.d/*-repository-*.conf"

SOLUS_SOURCES = (
    Source(UPSTREAM, None),
    Source(TUNA, "https://mirrors.tuna.tsinghua.edu.cn/solus/packages/shannon/eopkg-index.xml.xz"),
    Source(BFSU, "https://mirrors.bfsu.edu.cn/solus/packages/shannon/eopkg-index.xml.xz"),
    Source(NJU, "https://mirror.nju.edu.cn/solus/packages/shannon/eopkg-index.xml.xz"),
)

VOIDLINUX_SOURCES = (
    Source(UPSTREAM, "https://repo-default.voidlinux.org"),
    Source(TUNA, "https://mirrors.tuna.tsinghua.edu.cn/voidlinux"),
    Source(SJTUG_ZHIYUAN, "https://mirror.sjtu.edu.cn/voidlinux"),
    Source(BFSU, "https://mirrors.bfsu.edu.cn/voidlinux"),
)

OPENSUSE_SOURCES = (
    Source(UPSTREAM, None),
    Source(ALI, "https://mirrors.aliyun.com/opensuse"),
    Source(VOLCENGINE, "https://mirrors.volces.com/opensuse"),
    Source(BFSU, "https://mirrors.bfsu.edu.cn/opensuse"),
    Source(USTC, "https://mirrors.ustc.edu.cn/opensuse"),
    Source(TUNA, "https://mirrors.tuna.tsinghua.edu.cn/opensuse"),
    Source(TENCENT, "https://mirrors.tencent.com/opensuse"),
    Source(NETEASE, "https://mirrors.163.com/opensuse"),
    Source(SOHU, "https://mirrors.sohu.com/opensuse"),
)

# Repository path under the mirror and the alias zypper gives it.
_OPENSUSE_REPOS = (
    ("repo/oss/", "mirror-oss"),
    ("repo/non-oss/", "mirror-non-oss"),
    ("oss/", "mirror-update"),
    ("non-oss/", "mirror-update-non-oss"),
    ("sle/", "mirror-sle-update"),
    ("backports/", "mirror-backports-update"),
)


def solus_setsrc(host, source: Source) -> Plan:
    """Add ``source`` as the Solus repository."""
    plan = Plan()
    plan.ensure_root()
    plan.run(f"eopkg add-repo Solus {source.url}")
    plan.change_type = ChangeType.AUTO
    plan.source = source
    return plan


def voidlinux_getsrc(host) -> Plan:
    """List the repositories xbps uses."""
    plan = Plan()
    plan.run("xbps-query -L", RunOption.NO_LAST_NEW_LINE)
    return plan


def voidlinux_setsrc(host, source: Source) -> Plan:
    """Copy xbps's repository files and point them at ``source``."""
    plan = Plan()
    plan.ensure_root()
    plan.ensure_dir(XBPS_DIR)
    plan.run(f"cp /usr/share/xbps.d/*-repository-*.conf {XBPS_DIR}/")
    plan.run(
        f"sed -i 's|https://repo-default.voidlinux.org|{source.url}|g' {XBPS_REPOSITORY_CONFS}"
    )
    plan.note("若报错可尝试使用以下命令:")
    plan.echo(
        f"sed -i 's|https://alpha.de.repo.voidlinux.org|{source.url}|g' {XBPS_REPOSITORY_CONFS}"
    )
    plan.change_type = ChangeType.UNTESTED
    plan.source = source
    return plan


def _zypper_add(url: str, repo: str, alias: str) -> str:
    return (
        f"zypper ar -cfg '{url}/opensuse/distribution/leap/$releasever/{repo}' {alias}"
    )


def opensuse_setsrc(host, source: Source) -> Plan:
    """Disable current zypper repositories and add those of ``source``."""
    plan = Plan()
    plan.ensure_root()
    plan.run("zypper mr -da")
    adds = [_zypper_add(source.url, repo, alias) for repo, alias in _OPENSUSE_REPOS]
    for command in adds[:4]:
        plan.run(command)
    plan.note("leap 15.3用户还需要添加sle和backports源")
    plan.note("另外请确保系统在更新后仅启用了六个软件源，可以使用 zypper lr 检查软件源状态")
    plan.note("并使用 zypper mr -d 禁用多余的软件源")
    for command in adds[4:]:
        plan.run(command)
    plan.change_type = ChangeType.UNTESTED
    plan.source = source
    return plan


SOLUS = Target("solus", SOLUS_SOURCES, solus_setsrc)

VOIDLINUX = Target("voidlinux", VOIDLINUX_SOURCES, voidlinux_setsrc, getsrc=voidlinux_getsrc)

OPENSUSE = Target("opensuse", OPENSUSE_SOURCES, opensuse_setsrc)