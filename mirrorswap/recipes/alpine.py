"""Recipe for Alpine Linux."""

from __future__ import annotations

from ..recipe import UPSTREAM, ChangeType, Plan, RunOption, Source, Target
from .apt_common import ALI, HUAWEI, SJTUG_ZHIYUAN, SUSTECH, TENCENT, TUNA, ZJU
from .yum import LZUOSS

ALPINE_REPOSITORIES = "/etc/apk/repositories"

ALPINE_SOURCES = (
    Source(UPSTREAM, "http://dl-cdn.alpinelinux.org/alpine"),
    Source(TUNA, "https://mirrors.tuna.tsinghua.edu.cn/alpine"),
    Source(SJTUG_ZHIYUAN, "https://mirrors.sjtug.sjtu.edu.cn/alpine"),
    Source(SUSTECH, "https://mirrors.sustech.edu.cn/alpine"),
    Source(ZJU, "https://mirrors.zju.edu.cn/alpine"),
    Source(LZUOSS, "https://mirror.lzu.edu.cn/alpine"),
    Source(ALI, "https://mirrors.aliyun.com/alpine"),
    Source(TENCENT, "https://mirrors.cloud.tencent.com/alpine"),
    Source(HUAWEI, "https://mirrors.huaweicloud.com/alpine"),
)


def alpine_getsrc(host) -> Plan:
    """Show the apk repository list."""
    plan = Plan()
    plan.view(ALPINE_REPOSITORIES)
    return plan


def alpine_setsrc(host, source: Source) -> Plan:
    """Point apk's repositories at ``source`` and refresh the index."""
    plan = Plan()
    plan.run(
        r"sed -i 's#https\?://dl-cdn.alpinelinux.org/alpine#"
        f"{source.url}#g' {ALPINE_REPOSITORIES}"
    )
    plan.run("apk update", RunOption.NO_LAST_NEW_LINE)
    plan.change_type = ChangeType.UNTESTED
    plan.source = source
    return plan


ALPINE = Target("alpine", ALPINE_SOURCES, alpine_setsrc, getsrc=alpine_getsrc)