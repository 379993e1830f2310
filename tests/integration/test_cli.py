"""Integration tests running the dirwalk CLI in a subprocess.

These cover behavior that only shows up in a real process:
- Exit codes
- Output piped to a reader that closes early
- Version information
"""

import json
import subprocess
import sys

import pytest

pytestmark = pytest.mark.skipif(
    "not config.getoption('--run-cli-tests')", reason="Only run when --run-cli-tests is given"
)


def run_cli(*args, **kwargs):
    return subprocess.run(
        [sys.executable, "-m", "dirwalk.cli.main", *args],
        capture_output=True,
        text=True,
        **kwargs,
    )


@pytest.fixture
def wide_tree(tmp_path):
    for i in range(200):
        directory = tmp_path / f"dir{i:03d}"
        directory.mkdir()
        for j in range(20):
            (directory / f"file{j:02d}.txt").touch()
    return tmp_path


def test_cli_json_output(sample_tree):
    result = run_cli("-f", "json", str(sample_tree))

    assert result.returncode == 0
    records = [json.loads(line) for line in result.stdout.splitlines()]
    assert sorted(record["name"] for record in records) == ["a.txt", "b", "c.txt"]


def test_cli_version():
    result = run_cli("--version")

    assert result.returncode == 0
    assert result.stdout.startswith("dirwalk ")


def test_cli_usage_error():
    result = run_cli("-d", "deep", ".")

    assert result.returncode == 2
    assert "invalid depth limit" in result.stderr


def test_cli_invalid_root():
    result = run_cli("ftp://example.com/pub")

    assert result.returncode == 1
    assert result.stderr.startswith("Error: Only file:// URLs")


@pytest.mark.skipif(sys.platform == "win32", reason="SIGPIPE is not available on Windows")
def test_cli_closed_pipe(wide_tree):
    producer = subprocess.Popen(
        [sys.executable, "-m", "dirwalk.cli.main", str(wide_tree)],
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
    )
    assert producer.stdout is not None
    producer.stdout.readline()
    producer.stdout.close()
    _, stderr = producer.communicate(timeout=30)

    assert producer.returncode in (0, 141)
    assert b"Traceback" not in stderr
