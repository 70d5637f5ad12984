from mirrorswap.recipe import ChangeType
from mirrorswap.recipes.flathub import FLATHUB, FLATHUB_SOURCES, flathub_setsrc


class FakeHost:
    def file_exists(self, path):
        return False

    def program_exists(self, name):
        return False

    def command_output(self, command):
        return None

    def cpu_arch(self):
        return "x86_64"


def test_setsrc_modifies_remote():
    source = FLATHUB_SOURCES[1]
    plan = flathub_setsrc(FakeHost(), source)
    assert list(plan.commands()) == [
        "flatpak remote-modify flathub --url=https://mirror.sjtu.edu.cn/flathub"
    ]


def test_setsrc_concludes_auto():
    source = FLATHUB_SOURCES[1]
    plan = flathub_setsrc(FakeHost(), source)
    assert plan.change_type is ChangeType.AUTO
    assert plan.source is source


def test_target_has_upstream_first():
    upstream = FLATHUB.find_source("upstream")
    assert upstream == FLATHUB_SOURCES[0]
    assert upstream.url is None
    plan = FLATHUB.setsrc(FakeHost(), FLATHUB_SOURCES[1])
    assert plan.commands() == [
        "flatpak remote-modify flathub --url=https://mirror.sjtu.edu.cn/flathub"
    ]