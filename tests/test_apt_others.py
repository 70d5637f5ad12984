import pytest

from mirrorswap.recipe import ChangeType, RecipeError, RunOption, StepKind
from mirrorswap.recipes import apt_others
from mirrorswap.recipes.apt_common import (
    APT_SOURCELIST,
    RASPBERRYPI_SOURCELIST,
    ROS_SOURCELIST,
)


class FakeHost:
    def __init__(self, files=(), arch="x86_64"):
        self.files = set(files)
        self.arch = arch

    def file_exists(self, path):
        return path in self.files

    def program_exists(self, name):
        return False

    def command_output(self, command):
        return None

    def cpu_arch(self):
        return self.arch


def kinds(plan):
    return [step.kind for step in plan]


@pytest.mark.parametrize(
    "getsrc, path",
    [
        (apt_others.linuxlite_getsrc, APT_SOURCELIST),
        (apt_others.ros_getsrc, ROS_SOURCELIST),
        (apt_others.raspberrypi_getsrc, RASPBERRYPI_SOURCELIST),
        (apt_others.trisquel_getsrc, APT_SOURCELIST),
        (apt_others.deepin_getsrc, APT_SOURCELIST),
        (apt_others.openkylin_getsrc, APT_SOURCELIST),
    ],
)
def test_getsrc_views_config(getsrc, path):
    plan = getsrc(FakeHost())
    assert [(s.kind, s.path) for s in plan] == [(StepKind.VIEW, path)]


def test_linuxlite_setsrc_backs_up_and_updates():
    source = apt_others.LINUXLITE.find_source("mirrorz")
    plan = apt_others.linuxlite_setsrc(FakeHost(), source)
    assert kinds(plan) == [StepKind.ENSURE_ROOT, StepKind.BACKUP, StepKind.RUN]
    assert plan.steps[1].path == APT_SOURCELIST
    assert plan.commands() == ["apt update"]
    assert plan.change_type is ChangeType.AUTO
    assert plan.source is source


def test_ros_setsrc_commands():
    source = apt_others.ROS.find_source("tuna")
    plan = apt_others.ros_setsrc(FakeHost(), source)
    url = source.url
    assert plan.commands() == [
        f"sed -E -i 's@https?://.*/ros/ubuntu/?@{url}/ros/ubuntu@g' {ROS_SOURCELIST}",
        apt_others.ROS_KEY_COMMAND,
        "apt update",
    ]
    assert plan.steps[1].kind is StepKind.BACKUP
    assert plan.steps[1].path == ROS_SOURCELIST
    assert plan.steps[-1].option is RunOption.NO_LAST_NEW_LINE
    assert plan.change_type is ChangeType.UNTESTED


def test_ros_feature_matches_its_recipes():
    feature = apt_others.ROS.feature
    assert feature.can_get is True
    plan = apt_others.ROS.getsrc(FakeHost())
    assert [(s.kind, s.path) for s in plan] == [(StepKind.VIEW, ROS_SOURCELIST)]
    assert feature.can_reset is False
    assert feature.can_english is True
    assert feature.can_user_define is False
    assert "URL" in feature.note


def test_ros_find_source_by_code():
    assert apt_others.ROS.find_source("ali").url == "https://mirrors.aliyun.com"
    with pytest.raises(RecipeError):
        apt_others.ROS.find_source("nowhere")


@pytest.mark.parametrize(
    "target, setsrc, path, pattern",
    [
        (apt_others.RASPBERRYPI, apt_others.raspberrypi_setsrc, RASPBERRYPI_SOURCELIST, "https?://.*/.*/?"),
        (apt_others.TRISQUEL, apt_others.trisquel_setsrc, APT_SOURCELIST, "https?://.*/trisquel/?"),
        (apt_others.DEEPIN, apt_others.deepin_setsrc, APT_SOURCELIST, "https?://.*/deepin/?"),
        (apt_others.OPENKYLIN, apt_others.openkylin_setsrc, APT_SOURCELIST, "https?://.*/openkylin/?"),
    ],
)
def test_sed_recipes(target, setsrc, path, pattern):
    source = target.sources[1]
    plan = setsrc(FakeHost(), source)
    assert kinds(plan) == [StepKind.ENSURE_ROOT, StepKind.BACKUP, StepKind.RUN, StepKind.RUN]
    assert plan.steps[1].path == path
    sed, update = plan.commands()
    assert sed == f"sed -E -i 's@{pattern}@{source.url}@g' {path}"
    assert update == "apt update"
    assert plan.steps[-1].option is RunOption.NO_LAST_NEW_LINE
    assert plan.change_type is ChangeType.UNTESTED
    assert plan.source is source


def test_openkylin_sed_targets_file_as_separate_argument():
    source = apt_others.OPENKYLIN.find_source("netease")
    plan = apt_others.openkylin_setsrc(FakeHost(), source)
    assert plan.commands()[0].endswith("@g' " + APT_SOURCELIST)


@pytest.mark.parametrize(
    "target",
    [
        apt_others.LINUXLITE,
        apt_others.ROS,
        apt_others.RASPBERRYPI,
        apt_others.TRISQUEL,
        apt_others.DEEPIN,
        apt_others.OPENKYLIN,
    ],
)
def test_upstream_first_and_codes_resolve(target):
    upstream = target.find_source("upstream")
    assert upstream.is_upstream
    assert upstream == target.sources[0]
    for source in target.sources:
        assert target.find_source(source.mirror.code) == source