# tests/test_rules.py
"""Tests for the output-driven fix rules."""
import pytest

from wut.corrector.rules import (
    CORE_RULES, AptSearchRule, CdParentRule, DockerNotRunningRule, GitDidYouMeanRule,
    GitPushSetUpstreamRule, GoRunDirectoryRule, NpmMissingScriptRule, PortInUseRule,
    SudoPermissionDeniedRule,
)

UPSTREAM_OUTPUT = (
    "fatal: The current branch feature-x has no upstream branch.\n"
    "To push the current branch and set the remote as upstream, use\n"
    "\n"
    "    git push --set-upstream origin feature-x\n"
    "\n"
)


def test_rule_order():
    names = [rule.name for rule in CORE_RULES]
    assert names == [
        "git_push_set_upstream",
        "sudo_permission_denied",
        "git_did_you_mean",
        "apt_get_search",
        "brew_install_update",
        "cd_parent",
        "docker_not_running",
        "port_in_use",
        "go_run_directory",
        "npm_missing_script",
    ]


def test_git_push_set_upstream():
    rule = GitPushSetUpstreamRule()
    assert rule.matches("git push", UPSTREAM_OUTPUT)
    assert rule.rewrite("git push", UPSTREAM_OUTPUT) == ["git push --set-upstream origin feature-x"]
    assert not rule.matches("git pull", UPSTREAM_OUTPUT)


def test_sudo_permission_denied():
    rule = SudoPermissionDeniedRule()
    output = "cat: /etc/shadow: Permission denied"
    assert rule.matches("cat /etc/shadow", output)
    assert rule.rewrite("cat /etc/shadow", output) == ["sudo cat /etc/shadow"]
    assert not rule.matches("sudo cat /etc/shadow", output)
    assert rule.matches("apt install vim", "E: Are you root?")


def test_git_did_you_mean():
    rule = GitDidYouMeanRule()
    output = "git: 'stats' is not a git command. See 'git --help'.\n\nDid you mean this?\n\tstatus\n"
    assert rule.matches("git stats", output)
    assert rule.rewrite("git stats", output) == ["git status"]


def test_apt_search():
    rule = AptSearchRule()
    assert rule.matches("apt-get search vim", "")
    assert rule.rewrite("apt-get search vim", "") == ["apt-cache search vim"]
    assert rule.rewrite("apt search vim", "") == ["apt-cache search vim"]


def test_cd_parent():
    rule = CdParentRule()
    assert rule.matches("cd..", "")
    assert rule.rewrite("cd..", "") == ["cd .."]


def test_docker_not_running():
    rule = DockerNotRunningRule()
    output = "Cannot connect to the Docker daemon at unix:///var/run/docker.sock."
    assert rule.matches("docker ps", output)
    assert rule.rewrite("docker ps", output)[0] == "sudo systemctl start docker && docker ps"


def test_port_in_use():
    rule = PortInUseRule()
    output = "Error: listen EADDRINUSE: address already in use :::3000"
    assert rule.matches("npm start", output)
    assert rule.rewrite("npm start", output) == ["kill -9 $(lsof -t -i:3000) && npm start"]


def test_port_in_use_without_port():
    rule = PortInUseRule()
    assert rule.rewrite("npm start", "address already in use") == []


def test_go_run_directory():
    rule = GoRunDirectoryRule()
    assert rule.matches("go run", "")
    assert rule.matches("go run -race", "go run: no go files listed")
    assert rule.rewrite("go run", "") == ["go run ."]


def test_npm_missing_script():
    rule = NpmMissingScriptRule()
    output = 'npm ERR! Missing script: "biuld"\nnpm ERR!\nnpm ERR! Did you mean one of these?\n    build\n'
    assert rule.matches("npm run biuld", output)
    assert rule.rewrite("npm run biuld", output) == ["npm run build"]


@pytest.mark.parametrize("rule", CORE_RULES, ids=lambda rule: rule.name)
def test_rules_ignore_unrelated_output(rule):
    assert not rule.matches("make all", "make: *** No rule to make target 'all'.  Stop.")
