from mirrorswap.recipe import ChangeType, RunOption, StepKind
from mirrorswap.recipes.openwrt import (
    OPENWRT,
    OPENWRT_DISTFEEDS,
    openwrt_getsrc,
    openwrt_resetsrc,
    openwrt_setsrc,
)


class FakeHost:
    def file_exists(self, path):
        return True

    def program_exists(self, name):
        return True

    def command_output(self, command):
        return None

    def cpu_arch(self):
        return "x86_64"


def test_getsrc_views_distfeeds():
    plan = openwrt_getsrc(FakeHost())
    assert [(s.kind, s.path) for s in plan] == [(StepKind.VIEW, "/etc/opkg/distfeeds.conf")]


def test_setsrc_rewrites_release_urls():
    source = OPENWRT.find_source("tuna")
    plan = openwrt_setsrc(FakeHost(), source)
    commands = plan.commands()
    assert commands[0] == (
        f"sed -E -i 's@https?://.*/releases@{source.url}/releases@g' {OPENWRT_DISTFEEDS}"
    )
    assert commands[1] == "opkg update"
    assert plan.steps[0].kind is StepKind.ENSURE_ROOT
    assert plan.steps[1].kind is StepKind.BACKUP
    assert all(s.option is RunOption.NO_LAST_NEW_LINE for s in plan if s.kind is StepKind.RUN)
    assert plan.change_type is ChangeType.AUTO
    assert plan.source == source


def test_resetsrc_marks_reset():
    source = OPENWRT.sources[0]
    plan = openwrt_resetsrc(FakeHost(), source)
    assert plan.change_type is ChangeType.RESET
    assert plan.commands() == openwrt_setsrc(FakeHost(), source).commands()


def test_target_features():
    assert OPENWRT.feature.can_reset is True
    assert OPENWRT.feature.can_english is True
    assert OPENWRT.find_source("pku").url == "https://mirrors.pku.edu.cn/openwrt"