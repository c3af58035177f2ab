import pytest

from logicgraph.deploy import Deployment, deploy, load_deployment, main


@pytest.fixture
def out_dir(tmp_path):
    out = tmp_path / "out"
    out.mkdir()
    (out / "libinexor_rgf_plugin_logical.so").write_bytes(b"so-bytes")
    (out / "libinexor_rgf_plugin_logical.dll").write_bytes(b"dll-bytes")
    (out / "libinexor_rgf_plugin_logical.rlib").write_bytes(b"rlib")
    (out / "libother.so").write_bytes(b"other")
    return out


def write_config(path, dirs):
    listed = ", ".join(f'"{d.as_posix()}"' for d in dirs)
    path.write_text(f"target_dirs = [{listed}]\n", encoding="utf-8")
    return path


def test_load_deployment_round_trip(tmp_path):
    a, b = tmp_path / "a", tmp_path / "b"
    config = write_config(tmp_path / "deploy.toml", [a, b])
    assert load_deployment(config) == Deployment([a.as_posix(), b.as_posix()])


def test_load_deployment_missing_field(tmp_path):
    config = tmp_path / "deploy.toml"
    config.write_text('other = "x"\n', encoding="utf-8")
    with pytest.raises(ValueError):
        load_deployment(config)


def test_load_deployment_missing_file(tmp_path):
    with pytest.raises(OSError):
        load_deployment(tmp_path / "absent.toml")


def test_deploy_copies_only_libraries(tmp_path, out_dir):
    a, b = tmp_path / "a", tmp_path / "b"
    a.mkdir()
    b.mkdir()
    config = write_config(tmp_path / "deploy.toml", [a, b])
    copied = deploy(out_dir, config)
    assert len(copied) == 4
    for target in (a, b):
        assert sorted(p.name for p in target.iterdir()) == [
            "libinexor_rgf_plugin_logical.dll",
            "libinexor_rgf_plugin_logical.so",
        ]
        assert (target / "libinexor_rgf_plugin_logical.so").read_bytes() == b"so-bytes"


def test_deploy_skips_missing_target(tmp_path, out_dir):
    config = write_config(tmp_path / "deploy.toml", [tmp_path / "missing"])
    assert deploy(out_dir, config) == []
    assert not (tmp_path / "missing").exists()


def test_main_reports_unreadable_config(tmp_path, capsys):
    assert main(["--out-dir", str(tmp_path), "--config", str(tmp_path / "absent.toml")]) == 0
    assert "Could not read" in capsys.readouterr().err


def test_main_reports_invalid_config(tmp_path, capsys):
    config = tmp_path / "deploy.toml"
    config.write_text("target_dirs = [", encoding="utf-8")
    assert main(["--out-dir", str(tmp_path), "--config", str(config)]) == 0
    assert "Failed to parse" in capsys.readouterr().err


def test_main_uses_environment_out_dir(tmp_path, out_dir, monkeypatch, capsys):
    target = tmp_path / "t"
    target.mkdir()
    config = write_config(tmp_path / "deploy.toml", [target])
    monkeypatch.setenv("CRATE_OUT_DIR", str(out_dir))
    assert main(["--config", str(config)]) == 0
    assert (target / "libinexor_rgf_plugin_logical.dll").read_bytes() == b"dll-bytes"
    assert "Copy plugin from" in capsys.readouterr().out