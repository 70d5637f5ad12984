"""Recipe for Gentoo Linux."""

from __future__ import annotations

from ..recipe import UPSTREAM, ChangeType, Plan, Source, Target
from .apt_common import ALI, BFSU, NETEASE, SOHU, TENCENT, TUNA, USTC

GENTOO_REPOS_CONF = "/etc/portage/repos.conf/gentoo.conf"
GENTOO_MAKE_CONF = "/etc/portage/make.conf"

GENTOO_SOURCES = (
    Source(UPSTREAM, None),
    Source(ALI, "mirrors.aliyun.com"),
    Source(BFSU, "mirrors.bfsu.edu.cn"),
    Source(USTC, "mirrors.ustc.edu.cn"),
    Source(TUNA, "mirrors.tuna.tsinghua.edu.cn"),
    Source(TENCENT, "mirrors.tencent.com"),
    Source(NETEASE, "mirrors.163.com"),
    Source(SOHU, "mirrors.sohu.com"),
)


def gentoo_setsrc(host, source: Source) -> Plan:
    """Point Gentoo's rsync portage tree and distfile mirrors at ``source``."""
    plan = Plan()
    plan.ensure_root()
    plan.backup(GENTOO_REPOS_CONF)
    plan.run(f'sed -i "s#rsync://.*/gentoo-portage#rsync://{source.url}gentoo-portage#g')
    plan.append(f'GENTOO_MIRRORS="https://{source.url}gentoo"\n', GENTOO_MAKE_CONF)
    plan.change_type = ChangeType.UNTESTED
    plan.source = source
    return plan


GENTOO = Target("gentoo", GENTOO_SOURCES, gentoo_setsrc)