"""Recipe for Nix channels and binary caches."""

from __future__ import annotations

from ..recipe import UPSTREAM, ChangeType, Plan, Source, Target
from .apt_common import BFSU

NIX_CONF = "~/.config/nix/nix.conf"

# Channel and store paths are appended to this base URL.
NIX_SOURCES = (
    Source(UPSTREAM, None),
    Source(BFSU, "https://mirrors.bfsu.edu.cn/nix-channels/"),
)


def nix_setsrc(host, source: Source) -> Plan:
    """Add the unstable channel and binary cache served by ``source``."""
    plan = Plan()
    plan.require_program("nix-channel")
    url = source.url

    plan.run(f"nix-channel --add {url}nixpkgs-unstable nixpkgs")
    plan.append(f"substituters = {url}store https://cache.nixos.org/", NIX_CONF)
    plan.run("nix-channel --update")

    plan.note("若您使用的是NixOS，请确认您的系统版本<version>（如22.11），并手动运行:")
    plan.echo(f"nix-channel --add {url}nixpkgs-<version> nixpkgs")
    plan.note("若您使用的是NixOS，请额外添加下述内容至 configuration.nix 中")
    plan.echo(f'nix.settings.substituters = [ "{url}store" ];')

    plan.change_type = ChangeType.SEMI_AUTO
    plan.source = source
    return plan


NIX = Target("nix", NIX_SOURCES, nix_setsrc)