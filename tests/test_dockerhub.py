from mirrorswap.osutil import Platform
from mirrorswap.recipe import ChangeType, StepKind
from mirrorswap.recipes.dockerhub import (
    DOCKER_DAEMON_CONFIG,
    DOCKERHUB,
    dockerhub_getsrc,
    dockerhub_setsrc,
)


class FakeHost:
    def __init__(self, platform=Platform.LINUX, config=True, jq=True, output=None):
        self.platform = platform
        self.home = "/root"
        self._config = config
        self._jq = jq
        self._output = output
        self.queries = []

    def file_exists(self, path):
        return self._config and path == DOCKER_DAEMON_CONFIG

    def program_exists(self, name):
        return self._jq and name == "jq"

    def command_output(self, command):
        self.queries.append(command)
        return self._output

    def cpu_arch(self):
        return "x86_64"


SOURCE = DOCKERHUB.find_source("daocloud")


def test_getsrc_linux_views_config():
    plan = dockerhub_getsrc(FakeHost())
    assert [(s.kind, s.path) for s in plan] == [(StepKind.VIEW, "/etc/docker/daemon.json")]


def test_getsrc_macos_only_notes():
    plan = dockerhub_getsrc(FakeHost(Platform.MACOS))
    assert {s.kind for s in plan} == {StepKind.NOTE}
    assert len(plan) == 2


def test_setsrc_jq_adds_when_missing():
    host = FakeHost(output="null")
    plan = dockerhub_setsrc(host, SOURCE)
    assert SOURCE.url in host.queries[0]
    assert plan.commands() == [
        f"jq '.[\"registry-mirrors\"] |= [\"{SOURCE.url}\"] + .' "
        "/etc/docker/daemon.json.bak > /etc/docker/daemon.json"
    ]
    assert any(s.kind is StepKind.BACKUP for s in plan)
    assert plan.change_type is ChangeType.MANUAL


def test_setsrc_jq_skips_when_present():
    plan = dockerhub_setsrc(FakeHost(output="0"), SOURCE)
    assert plan.commands() == []
    assert "已存在源，无需重复添加" in [s.text for s in plan]


def test_setsrc_without_jq_uses_sed():
    plan = dockerhub_setsrc(FakeHost(jq=False), SOURCE)
    (command,) = plan.commands()
    assert command.startswith("sed -z -i")
    assert SOURCE.url in command
    assert command.endswith(DOCKER_DAEMON_CONFIG)


def test_setsrc_creates_config_when_missing():
    plan = dockerhub_setsrc(FakeHost(config=False), SOURCE)
    assert plan.commands() == ["touch /etc/docker/daemon.json"]
    appended = [s for s in plan if s.kind is StepKind.APPEND]
    assert appended[0].path == DOCKER_DAEMON_CONFIG
    assert appended[0].text == '{\n  "registry-mirrors": ["' + SOURCE.url + '"]\n}'


def test_setsrc_bsd_asks_for_manual_restart():
    plan = dockerhub_setsrc(FakeHost(Platform.BSD, config=False), SOURCE)
    assert plan.steps[-1].text == "然后请手动重启 docker 服务"


def test_setsrc_desktop_echoes_url():
    plan = dockerhub_setsrc(FakeHost(Platform.WINDOWS), SOURCE)
    assert plan.commands() == []
    assert [s.text for s in plan if s.kind is StepKind.ECHO] == [SOURCE.url]