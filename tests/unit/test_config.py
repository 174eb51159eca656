from pathlib import Path

from covreport.config import DEFAULT_OUTPUT_DIR, RunConfig


def test_runconfig_from_env(monkeypatch, tmp_path):
    """RunConfig.from_env reads the COVREPORT_* variables."""
    monkeypatch.setenv("COVREPORT_WORKDIR", str(tmp_path))
    monkeypatch.setenv("COVREPORT_OUTPUT_DIR", "out/cov")
    monkeypatch.setenv("COVREPORT_CARGO", "cargo+nightly")
    monkeypatch.setenv("COVREPORT_GENHTML", "/usr/local/bin/genhtml")

    cfg = RunConfig.from_env()

    assert cfg.working_dir == tmp_path
    assert cfg.output_dir == Path("out/cov")
    assert cfg.collector == "cargo+nightly"
    assert cfg.renderer == "/usr/local/bin/genhtml"


def test_runconfig_defaults(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)

    cfg = RunConfig.from_env()

    assert cfg.working_dir == Path.cwd()
    assert cfg.output_dir == Path(DEFAULT_OUTPUT_DIR)
    assert cfg.collector == "cargo"
    assert cfg.renderer == "genhtml"
