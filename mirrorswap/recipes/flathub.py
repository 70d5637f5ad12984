"""Recipe for the Flathub remote of Flatpak."""

from __future__ import annotations

from ..recipe import UPSTREAM, ChangeType, Plan, Source, Target
from .apt_common import SJTUG_ZHIYUAN

# Only one mirror serves Flathub so far.
FLATHUB_SOURCES = (
    Source(UPSTREAM, None),
    Source(SJTUG_ZHIYUAN, "https://mirror.sjtu.edu.cn/flathub"),
)


def flathub_setsrc(host, source: Source) -> Plan:
    """Point the flathub remote at ``source``."""
    plan = Plan()
    plan.note("若出现问题，可先调用以下命令:")
    plan.echo(
        f"wget {source.url}/flathub.gpg\n"
        "flatpak remote-modify --gpg-import=flathub.gpg flathub"
    )
    plan.run(f"flatpak remote-modify flathub --url={source.url}")
    plan.change_type = ChangeType.AUTO
    plan.source = source
    return plan


FLATHUB = Target("flathub", FLATHUB_SOURCES, flathub_setsrc)