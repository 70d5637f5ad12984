from mirrorswap.recipe import ChangeType, RecipeError, RunOption, StepKind
from mirrorswap.recipes import pacman

import pytest


class FakeHost:
    def __init__(self, arch="x86_64"):
        self.arch = arch

    def file_exists(self, path):
        return False

    def program_exists(self, name):
        return False

    def command_output(self, command):
        return None

    def cpu_arch(self):
        return self.arch


def _steps(plan, kind):
    return [step for step in plan if step.kind is kind]


def test_arch_setsrc_x86():
    source = pacman.ARCH.find_source("tuna")
    plan = pacman.arch_setsrc(FakeHost(), source)
    (prepend,) = _steps(plan, StepKind.PREPEND)
    assert prepend.text == "Server = " + source.url + "/$repo/os/$arch"
    assert prepend.path == pacman.PACMAN_MIRRORLIST
    assert plan.commands() == ["pacman -Syyu"]
    assert plan.change_type is ChangeType.AUTO
    assert plan.source == source


def test_arch_setsrc_arm():
    source = pacman.ARCH.find_source("ustc")
    plan = pacman.arch_setsrc(FakeHost("aarch64"), source)
    (prepend,) = _steps(plan, StepKind.PREPEND)
    assert prepend.text == "Server = " + source.url + "arm/$arch/$repo"
    assert plan.commands() == ["pacman -Syy"]


def test_arch_backup_before_prepend():
    source = pacman.ARCH.find_source("ali")
    kinds = [step.kind for step in pacman.arch_setsrc(FakeHost(), source)]
    assert kinds[0] is StepKind.ENSURE_ROOT
    assert kinds.index(StepKind.BACKUP) < kinds.index(StepKind.PREPEND)


def test_arch_getsrc_views_mirrorlist():
    plan = pacman.arch_getsrc(FakeHost())
    assert [(s.kind, s.path) for s in plan] == [(StepKind.VIEW, "/etc/pacman.d/mirrorlist")]
    assert [s.path for s in pacman.archlinuxcn_getsrc(FakeHost())] == ["/etc/pacman.d/mirrorlist"]


def test_archlinuxcn_setsrc():
    source = pacman.ARCHLINUXCN.find_source("bfsu")
    plan = pacman.archlinuxcn_setsrc(FakeHost(), source)
    (prepend,) = _steps(plan, StepKind.PREPEND)
    assert prepend.text == "[archlinuxcn]\nServer = " + source.url + "$arch"
    runs = _steps(plan, StepKind.RUN)
    assert runs[0].text.startswith("pacman-key --lsign-key")
    assert runs[0].option is RunOption.DONT_ABORT_ON_FAILURE
    assert runs[1].text == "pacman -Sy archlinuxcn-keyring"
    assert runs[2].option is RunOption.NO_LAST_NEW_LINE
    assert plan.change_type is ChangeType.UNTESTED


def test_msys2_setsrc():
    source = pacman.MSYS2.find_source("huawei")
    plan = pacman.msys2_setsrc(FakeHost(), source)
    assert [s.path for s in _steps(plan, StepKind.BACKUP)] == list(pacman.MSYS2_MIRRORLISTS)
    (note,) = _steps(plan, StepKind.NOTE)
    assert source.url + "distrib/" in note.text
    (command,) = plan.commands()
    assert "#" + source.url + "#g" in command
    assert plan.change_type is ChangeType.UNTESTED


def test_manjaro_setsrc():
    plan = pacman.manjaro_setsrc(FakeHost())
    assert plan.commands() == ["pacman-mirrors -i -c China -m rank", "pacman -Syy"]
    assert plan.source is None
    assert plan.change_type is ChangeType.AUTO


def test_unknown_mirror_raises():
    with pytest.raises(RecipeError):
        pacman.ARCH.find_source("sohu")


def test_features_match_recipes():
    assert pacman.ARCH.feature.can_get is True
    plan = pacman.ARCH.getsrc(FakeHost())
    assert [s.kind for s in plan] == [StepKind.VIEW]
    assert pacman.ARCHLINUXCN.feature.can_reset is False
    assert "archlinuxcn" in pacman.ARCH.feature.note