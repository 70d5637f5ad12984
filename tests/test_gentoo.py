import pytest

from mirrorswap.recipe import ChangeType, RecipeError, StepKind
from mirrorswap.recipes import gentoo


class FakeHost:
    def file_exists(self, path):
        return False

    def program_exists(self, name):
        return False

    def command_output(self, command):
        return None

    def cpu_arch(self):
        return "x86_64"


def test_gentoo_setsrc_step_order():
    source = gentoo.GENTOO.find_source("ustc")
    plan = gentoo.gentoo_setsrc(FakeHost(), source)
    assert [s.kind for s in plan] == [
        StepKind.ENSURE_ROOT,
        StepKind.BACKUP,
        StepKind.RUN,
        StepKind.APPEND,
    ]
    assert list(plan)[1].path == "/etc/portage/repos.conf/gentoo.conf"


def test_gentoo_rsync_command_uses_url():
    source = gentoo.GENTOO.find_source("tuna")
    (command,) = gentoo.gentoo_setsrc(FakeHost(), source).commands()
    assert "rsync://" + source.url + "gentoo-portage" in command


def test_gentoo_make_conf_mirrors():
    source = gentoo.GENTOO.find_source("netease")
    plan = gentoo.gentoo_setsrc(FakeHost(), source)
    (append,) = [s for s in plan if s.kind is StepKind.APPEND]
    assert append.text == 'GENTOO_MIRRORS="https://' + source.url + 'gentoo"\n'
    assert append.path == "/etc/portage/make.conf"
    assert plan.change_type is ChangeType.UNTESTED


def test_gentoo_upstream_has_no_url():
    assert gentoo.GENTOO.find_source("upstream").url is None
    with pytest.raises(RecipeError):
        gentoo.GENTOO.find_source("huawei")