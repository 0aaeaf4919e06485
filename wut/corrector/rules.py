# wut/corrector/rules.py
"""
Fix rules keyed on the error output of well-known tools.

Each rule answers two questions about a failed command: does the captured
output look like the error I know (``matches``), and which commands would
fix it (``rewrite``). Rules are consulted in ``CORE_RULES`` order.
"""
import re
from typing import List

from wut.utils.command_utils import split_command


class Rule:
    """Base class for output-driven fix rules."""

    name = "rule"
    explanation = ""

    def matches(self, command: str, output: str) -> bool:
        raise NotImplementedError

    def rewrite(self, command: str, output: str) -> List[str]:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self.name}>"


class GitPushSetUpstreamRule(Rule):
    name = "git_push_set_upstream"
    explanation = "Set upstream branch for git push"

    SUGGESTION = re.compile(r"git push --set-upstream origin[^\n]*")

    def matches(self, command: str, output: str) -> bool:
        return command.startswith("git push") and "git push --set-upstream" in output

    def rewrite(self, command: str, output: str) -> List[str]:
        # Lift the exact invocation git printed
        match = self.SUGGESTION.search(output)
        if match is None:
            return []
        return [match.group(0).strip()]


class SudoPermissionDeniedRule(Rule):
    name = "sudo_permission_denied"
    explanation = "Command requires elevated privileges (sudo)"

    MARKERS = ("permission denied", "operation not permitted", "are you root")

    def matches(self, command: str, output: str) -> bool:
        if command.startswith("sudo "):
            return False
        lowered = output.lower()
        return any(marker in lowered for marker in self.MARKERS)

    def rewrite(self, command: str, output: str) -> List[str]:
        return [f"sudo {command}"]


class GitDidYouMeanRule(Rule):
    name = "git_did_you_mean"
    explanation = "Git suggested a correct command"

    SUGGESTION = re.compile(r"Did you mean this\?\n\s+([A-Za-z0-9_-]+)")

    def matches(self, command: str, output: str) -> bool:
        return command.startswith("git ") and "Did you mean this?" in output

    def rewrite(self, command: str, output: str) -> List[str]:
        match = self.SUGGESTION.search(output)
        parts = split_command(command)
        if match is None or len(parts) < 2:
            return []
        parts[1] = match.group(1)
        return [" ".join(parts)]


class AptSearchRule(Rule):
    name = "apt_get_search"
    explanation = "Use apt-cache to search for packages instead"

    def matches(self, command: str, output: str) -> bool:
        return command.startswith(("apt-get search", "apt search"))

    def rewrite(self, command: str, output: str) -> List[str]:
        if command.startswith("apt-get"):
            return [command.replace("apt-get", "apt-cache", 1)]
        return [command.replace("apt search", "apt-cache search", 1)]


class BrewInstallUpdateRule(Rule):
    name = "brew_install_update"
    explanation = "Formula not found, updating brew might help"

    def matches(self, command: str, output: str) -> bool:
        return command.startswith("brew install") and "No available formula" in output

    def rewrite(self, command: str, output: str) -> List[str]:
        return [f"brew update && {command}"]


class CdParentRule(Rule):
    name = "cd_parent"
    explanation = "Missing space in cd command"

    def matches(self, command: str, output: str) -> bool:
        return command.startswith("cd..")

    def rewrite(self, command: str, output: str) -> List[str]:
        return [command.replace("cd..", "cd ..", 1)]


class DockerNotRunningRule(Rule):
    name = "docker_not_running"
    explanation = "Docker daemon is not running, starting it first"

    def matches(self, command: str, output: str) -> bool:
        return command.startswith("docker ") and "Cannot connect to the Docker daemon" in output

    def rewrite(self, command: str, output: str) -> List[str]:
        return [
            f"sudo systemctl start docker && {command}",
            f"sudo service docker start && {command}",
        ]


class PortInUseRule(Rule):
    name = "port_in_use"
    explanation = "Port is in use, attempt to kill the blocking process"

    PORT = re.compile(r":(\d{2,5})")

    def matches(self, command: str, output: str) -> bool:
        return "address already in use" in output or "port is already allocated" in output

    def rewrite(self, command: str, output: str) -> List[str]:
        match = self.PORT.search(output)
        if match is None:
            return []
        port = match.group(1)
        return [f"kill -9 $(lsof -t -i:{port}) && {command}"]


class GoRunDirectoryRule(Rule):
    name = "go_run_directory"
    explanation = "Run all go files in the current directory"

    def matches(self, command: str, output: str) -> bool:
        if command == "go run":
            return True
        return command.startswith("go run") and "go run: no go files listed" in output

    def rewrite(self, command: str, output: str) -> List[str]:
        return ["go run ."]


class NpmMissingScriptRule(Rule):
    name = "npm_missing_script"
    explanation = "Likely a typo in the npm script name"

    SUGGESTION = re.compile(r"Did you mean one of these\?\n\s+([A-Za-z0-9_-]+)")

    def matches(self, command: str, output: str) -> bool:
        return command.startswith("npm run") and "Missing script:" in output

    def rewrite(self, command: str, output: str) -> List[str]:
        match = self.SUGGESTION.search(output)
        parts = split_command(command)
        if match is None or len(parts) < 3:
            return []
        parts[2] = match.group(1)
        return [" ".join(parts)]


# Declaration order is evaluation order
CORE_RULES: List[Rule] = [
    GitPushSetUpstreamRule(),
    SudoPermissionDeniedRule(),
    GitDidYouMeanRule(),
    AptSearchRule(),
    BrewInstallUpdateRule(),
    CdParentRule(),
    DockerNotRunningRule(),
    PortInUseRule(),
    GoRunDirectoryRule(),
    NpmMissingScriptRule(),
]
