# tests/test_safety.py
"""Tests for destructive-command detection."""
import pytest

from wut.corrector.models import Correction
from wut.safety import check_dangerous, is_dangerous


def test_rm_rf_root():
    correction = check_dangerous("rm -rf /")
    assert correction.dangerous is True
    assert correction.corrected == ""
    assert correction.confidence == 1.0
    assert correction.warn_only


@pytest.mark.parametrize("command", [
    "rm -rf /*",
    "RM -RF /",
    "  rm   -rf   /  ",
    "rm -rf --no-preserve-root /",
    "dd if=/dev/zero of=/dev/sda bs=1M",
    "mkfs.ext4 /dev/sda",
    ":(){ :|:& };:",
    "chmod -R 777 /",
    "dd if=/dev/zero of=/dev/sda1",
    "mkfs.ext4 /dev/sda1",
    "rm -rf /;",
    "rm -rf / && echo done",
    "rm -rf /|cat",
])
def test_listed_commands(command):
    correction = check_dangerous(command)
    assert correction is not None
    assert correction.confidence == 1.0


@pytest.mark.parametrize("command", [
    "sudo rm -rf /",
    "rm -r -f /etc",
    "rm --recursive ~",
    "rm -Rf $HOME",
    "cd /tmp && rm -rf /",
])
def test_recursive_delete_of_root_like_path(command):
    correction = check_dangerous(command)
    assert correction is not None
    assert correction.dangerous
    assert correction.confidence >= 0.95


def test_disk_device_redirect():
    correction = check_dangerous("cat image.iso > /dev/sdb")
    assert correction.confidence == pytest.approx(0.95)
    assert "disk device" in correction.explanation


def test_nvme_device_redirect():
    assert is_dangerous("echo x > /dev/nvme0n1")


@pytest.mark.parametrize("command", [
    "rm -rf /tmp/build",
    "rm -rf /.cache-old",
    "chmod -R 777 /srv-data",
    "rm -rf ./node_modules",
    "rm file.txt",
    "ls /",
    "echo hi > /dev/null",
    "git status",
    "",
])
def test_safe_commands(command):
    assert check_dangerous(command) is None


def test_dangerous_correction_requires_high_confidence():
    with pytest.raises(ValueError):
        Correction(original="x", confidence=0.5, dangerous=True)
