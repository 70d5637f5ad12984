"""Recipes that only tell the user what to do: CocoaPods and Emacs."""

from __future__ import annotations

from ..recipe import UPSTREAM, ChangeType, MirrorSite, Plan, Source, Target
from .apt_common import BFSU, SJTUG_ZHIYUAN, TUNA, USTC, ZJU

EMACS_CHINA = MirrorSite(
    "emacschina", "EmacsChina", "Emacs China 社区", "https://elpamirror.emacs-china.org/"
)

COCOAPODS_SOURCES = (
    Source(UPSTREAM, None),
    Source(TUNA, "https://mirrors.tuna.tsinghua.edu.cn/git/CocoaPods/Specs.git"),
    Source(BFSU, "https://mirrors.bfsu.edu.cn/git/CocoaPods/Specs.git"),
)

# Emacs users rarely switch more than once, so these point at documentation.
EMACS_SOURCES = (
    Source(UPSTREAM, None),
    Source(SJTUG_ZHIYUAN, "https://mirrors.sjtug.sjtu.edu.cn/docs/emacs-elpa"),
    Source(TUNA, "https://mirrors.tuna.tsinghua.edu.cn/help/elpa/"),
    Source(BFSU, "https://mirrors.bfsu.edu.cn/help/elpa/"),
    Source(USTC, "https://mirrors.ustc.edu.cn/help/elpa.html"),
    Source(ZJU, "https://mirrors.zju.edu.cn/docs/elpa/"),
    Source(EMACS_CHINA, "https://elpamirror.emacs-china.org/"),
)


def cocoapods_setsrc(host, source: Source) -> Plan:
    """Print the commands and Podfile line that switch CocoaPods to ``source``."""
    plan = Plan()
    plan.note("请手动执行以下命令:")
    plan.echo("cd ~/.cocoapods/repos")
    plan.echo("pod repo remove master")
    plan.echo(f"git clone {source.url} master")
    plan.echo("")
    plan.note("最后进入项目工程目录，在Podfile中第一行加入:")
    plan.echo(f"source '{source.url}'")
    plan.change_type = ChangeType.MANUAL
    plan.source = source
    return plan


def emacs_setsrc(host, source: Source) -> Plan:
    """Point the user at the mirror's ELPA documentation."""
    plan = Plan()
    plan.note("Emacs换源涉及Elisp，需要手动查阅并换源:")
    plan.echo(source.url)
    plan.change_type = ChangeType.MANUAL
    plan.source = source
    return plan


COCOAPODS = Target("cocoapods", COCOAPODS_SOURCES, cocoapods_setsrc)

EMACS = Target("emacs", EMACS_SOURCES, emacs_setsrc)