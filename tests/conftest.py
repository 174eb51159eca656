from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def clean_covreport_env(monkeypatch):
    """
    Drop any COVREPORT_* settings from the developer's shell or .env
    so every test starts from the built-in defaults.
    """
    for var in (
        "COVREPORT_WORKDIR",
        "COVREPORT_OUTPUT_DIR",
        "COVREPORT_CARGO",
        "COVREPORT_GENHTML",
    ):
        monkeypatch.delenv(var, raising=False)


class FakeLauncher:
    """Records every (argv, cwd) call instead of spawning a process.

    ``codes`` maps a program name to the exit status it should return;
    ``missing`` lists programs that behave as if they are not on PATH.
    """

    def __init__(self, codes=None, missing=()):
        self.codes = dict(codes or {})
        self.missing = set(missing)
        self.calls = []

    def __call__(self, argv, cwd):
        self.calls.append((list(argv), Path(cwd)))
        program = argv[0]
        if program in self.missing:
            raise FileNotFoundError(2, "No such file or directory", program)
        return self.codes.get(program, 0)

    @property
    def programs(self):
        return [argv[0] for argv, _ in self.calls]


@pytest.fixture
def fake_launcher():
    return FakeLauncher


@pytest.fixture
def patch_launcher(monkeypatch):
    """Install a FakeLauncher as the runner's default launcher."""

    def _install(**kwargs):
        fake = FakeLauncher(**kwargs)
        monkeypatch.setattr("covreport.runner.subprocess_launcher", fake)
        return fake

    return _install
