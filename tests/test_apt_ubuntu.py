from mirrorswap.osutil import Platform
from mirrorswap.recipe import ChangeType, Host, MirrorSite, Source, StepKind
from mirrorswap.recipes.apt_common import (
    APT_SOURCELIST,
    LINUXMINT_SOURCELIST,
    UBUNTU_SOURCELIST_DEB822,
)
from mirrorswap.recipes.apt_ubuntu import (
    UBUNTU,
    linuxmint_getsrc,
    linuxmint_setsrc,
    ubuntu_getsrc,
    ubuntu_resetsrc,
    ubuntu_setsrc,
)

SOURCE = Source(MirrorSite("test", "Test", "Test mirror"), "https://mirror.example.com/ubuntu")


class FakeHost(Host):
    def __init__(self, files=(), arch="x86_64", codename="noble"):
        super().__init__(Platform.LINUX)
        self.files = set(files)
        self.arch = arch
        self.codename = codename

    def file_exists(self, path):
        return path in self.files

    def command_output(self, command):
        if "VERSION_CODENAME" in command:
            return self.codename
        return None

    def cpu_arch(self):
        return self.arch


def test_getsrc_prefers_deb822():
    plan = ubuntu_getsrc(FakeHost({UBUNTU_SOURCELIST_DEB822, APT_SOURCELIST}))
    assert [s.path for s in plan] == [UBUNTU_SOURCELIST_DEB822]


def test_getsrc_missing_reports_error_in_english():
    plan = ubuntu_getsrc(FakeHost(), english=True)
    assert plan.steps[0].kind is StepKind.ERROR
    assert plan.steps[0].text.startswith("Source config file missing!")


def test_setsrc_deb822_x86():
    plan = ubuntu_setsrc(FakeHost({UBUNTU_SOURCELIST_DEB822}), SOURCE, english=True)
    assert plan.steps[1].text == "Will change source based on new format"
    assert plan.steps[2].path == UBUNTU_SOURCELIST_DEB822
    cmd = plan.commands()[0]
    assert "/ubuntu/?@" + SOURCE.url + "@g" in cmd
    assert cmd.endswith(UBUNTU_SOURCELIST_DEB822)
    assert plan.change_type is ChangeType.AUTO


def test_setsrc_ports_on_arm():
    plan = ubuntu_setsrc(FakeHost({APT_SOURCELIST}, arch="aarch64"), SOURCE)
    cmd = plan.commands()[0]
    assert "ubuntu-ports" in cmd
    assert SOURCE.url + "-ports@g" in cmd
    assert [s.path for s in plan if s.kind is StepKind.BACKUP] == [APT_SOURCELIST]


def test_setsrc_generates_missing_list():
    plan = ubuntu_setsrc(FakeHost(), SOURCE)
    overwrite = [s for s in plan if s.kind is StepKind.OVERWRITE]
    assert len(overwrite) == 1
    assert "noble-security" in overwrite[0].text
    assert StepKind.BACKUP not in [s.kind for s in plan]


def test_resetsrc_matches_setsrc():
    host = FakeHost({APT_SOURCELIST})
    assert ubuntu_resetsrc(host, SOURCE).steps == ubuntu_setsrc(host, SOURCE).steps


def test_ubuntu_target_upstream():
    assert UBUNTU.find_source("upstream").url.startswith("http://archive.ubuntu.com")
    assert UBUNTU.feature.can_reset is True


def test_linuxmint():
    assert [s.path for s in linuxmint_getsrc(FakeHost())] == [LINUXMINT_SOURCELIST]
    plan = linuxmint_setsrc(FakeHost(), SOURCE)
    assert plan.steps[-1].kind is StepKind.WARN
    assert SOURCE.url in plan.commands()[0]
    assert plan.commands()[-1] == "apt update"
    assert plan.change_type is ChangeType.AUTO