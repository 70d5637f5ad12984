"""Recipe for Docker Hub registry mirrors."""

from __future__ import annotations

from ..osutil import Platform
from ..recipe import (
    UPSTREAM,
    Capability,
    ChangeType,
    Feature,
    MirrorSite,
    Plan,
    Source,
    Target,
)

DOCKER_DAEMON_CONFIG = "/etc/docker/daemon.json"

DAOCLOUD = MirrorSite(
    "daocloud",
    "DaoCloud",
    "上海道客网络科技有限公司",
    "https://www.daocloud.io/",
    "https://qiniu-download-public.daocloud.io/DaoCloud_Enterprise/dce5/"
    "offline-community-v0.18.0-amd64.tar",
)

FIT2CLOUD = MirrorSite(
    "fit2cloud", "FIT2CLOUD", "杭州飞致云信息科技有限公司", "https://www.fit2cloud.com/"
)

HUECKER = MirrorSite(
    "huecker",
    "(Russia) Huecker",
    "俄罗斯 Huecker.io",
    "https://huecker.io/",
    "https://huecker.io/en/use.html",
)

DOCKERHUB_SOURCES = (
    Source(UPSTREAM, None),
    Source(DAOCLOUD, "https://docker.m.daocloud.io"),
    Source(FIT2CLOUD, "https://docker.1panel.live"),
    Source(HUECKER, "https://huecker.io"),
)

_DESKTOP_HINT = "请打开Docker Desktop设置"


def _uses_daemon_config(host) -> bool:
    return host.platform in (Platform.LINUX, Platform.BSD)


def dockerhub_getsrc(host) -> Plan:
    """Show the registry mirrors, or explain where Docker Desktop keeps them."""
    plan = Plan()
    if _uses_daemon_config(host):
        plan.view(DOCKER_DAEMON_CONFIG)
    else:
        plan.note(_DESKTOP_HINT)
        plan.note("选择“Docker Engine”选项卡，在该选项卡中找到“registry-mirrors”一栏查看")
    return plan


def _update_existing_config(plan: Plan, host, url: str) -> None:
    plan.note("已找到Docker配置文件，将自动换源")
    plan.backup(DOCKER_DAEMON_CONFIG)
    if host.program_exists("jq"):
        query = f"jq '.[\"registry-mirrors\"] | index(\"{url}\")' {DOCKER_DAEMON_CONFIG}"
        found = host.command_output(query)
        if found and found != "null":
            plan.note("已存在源，无需重复添加")
        else:
            plan.run(
                f"jq '.[\"registry-mirrors\"] |= [\"{url}\"] + .' "
                f"{DOCKER_DAEMON_CONFIG}.bak > {DOCKER_DAEMON_CONFIG}"
            )
            plan.note("源已添加")
    else:
        plan.note("未找到 jq 命令, 将使用 sed 换源")
        plan.run(
            "sed -z -i 's|\"registry-mirrors\":[^]]*]|\"registry-mirrors\":[\""
            f"{url}\"]|' {DOCKER_DAEMON_CONFIG}"
        )


def dockerhub_setsrc(host, source: Source) -> Plan:
    """Add ``source`` to Docker's registry mirrors."""
    plan = Plan()
    plan.ensure_root()
    url = source.url
    if _uses_daemon_config(host):
        if host.file_exists(DOCKER_DAEMON_CONFIG):
            _update_existing_config(plan, host, url)
        else:
            plan.note("未找到Docker配置文件, 将自动创建")
            plan.ensure_dir("/etc/docker")
            plan.run(f"touch {DOCKER_DAEMON_CONFIG}")
            plan.append(
                '{\n  "registry-mirrors": ["' + url + '"]\n}', DOCKER_DAEMON_CONFIG
            )
        if host.platform is Platform.LINUX:
            # Restarting docker stops every container, so leave it to the user.
            plan.note("请自行运行: sudo systemctl restart docker")
            plan.note("该命令会重启所有容器, 请在合适的时机执行")
        else:
            plan.note("然后请手动重启 docker 服务")
    else:
        plan.note(_DESKTOP_HINT)
        plan.note(
            "选择“Docker Engine”选项卡，在该选项卡中找到“registry-mirrors”一栏，添加镜像地址:"
        )
        plan.echo(url)
    plan.change_type = ChangeType.MANUAL
    plan.source = source
    return plan


DOCKERHUB = Target(
    "dockerhub",
    DOCKERHUB_SOURCES,
    dockerhub_setsrc,
    getsrc=dockerhub_getsrc,
    feature=Feature(
        can_get=True,
        can_reset=False,
        cap_locally=Capability.CAN_NOT,
        can_english=False,
        can_user_define=True,
    ),
)