import json

import pytest

from interopgen.cli import main


def test_generates_native_and_foreign(sample_path, tmp_path, capsys):
    assert main([str(sample_path), "-o", str(tmp_path)]) == 0

    native = (tmp_path / "panda_sample_csharp_wrappers.cpp").read_text()
    foreign = (tmp_path / "panda_sample_native_methods.cs").read_text()
    assert '#include "typeHandle.h"' in native
    assert "namespace Panda3D" in foreign
    assert "Generated:" in capsys.readouterr().out


def test_cli_flags_override_catalog_options(sample_path, tmp_path):
    main([str(sample_path), "-o", str(tmp_path), "--namespace", "Engine", "--no-function-names",
          "--spam", "--foreign-name", "Native.cs"])

    native = (tmp_path / "panda_sample_csharp_wrappers.cpp").read_text()
    assert "namespace Engine" in (tmp_path / "Native.cs").read_text()
    assert "static unsigned long long _inCS_get_frame_count_0(const int& param0);" in native
    assert "#ifndef NDEBUG" in native


def test_ctypes_target_with_manifest(sample_path, tmp_path):
    main([str(sample_path), "-o", str(tmp_path), "--target", "ctypes", "--manifest"])

    assert "_lib._inPY_get_frame_count_0.restype = ctypes.c_ulonglong" in \
        (tmp_path / "panda_sample_native_methods.py").read_text()
    manifest = json.loads((tmp_path / "panda_sample_ctypes_wrappers.json").read_text())
    assert manifest["get_frame_count"][0]["unique_name"] == "ctypes_get_frame_count_0"


def test_no_foreign(sample_path, tmp_path):
    main([str(sample_path), "-o", str(tmp_path), "--no-foreign"])
    assert [p.name for p in tmp_path.iterdir()] == ["panda_sample_csharp_wrappers.cpp"]


def test_check_mode(sample_path, tmp_path, capsys):
    assert main([str(sample_path), "-o", str(tmp_path), "--check"]) == 1
    assert not any(tmp_path.iterdir())
    assert "+++ b/" in capsys.readouterr().out

    main([str(sample_path), "-o", str(tmp_path)])
    assert main([str(sample_path), "-o", str(tmp_path), "--check"]) == 0


def test_dry_run_writes_nothing(sample_path, tmp_path):
    assert main([str(sample_path), "-o", str(tmp_path), "--dry-run"]) == 0
    assert not any(tmp_path.iterdir())


def test_bad_catalog_exits_with_message(tmp_path):
    catalog = tmp_path / "bad.json"
    catalog.write_text(json.dumps({"functions": [{"name": "f", "remaps": [{"kind": "operator"}]}]}))
    with pytest.raises(SystemExit, match="unknown kind 'operator'"):
        main([str(catalog), "-o", str(tmp_path / "out")])


def test_unknown_target_is_rejected(sample_path, tmp_path):
    with pytest.raises(SystemExit) as exc:
        main([str(sample_path), "-o", str(tmp_path), "--target", "java"])
    assert exc.value.code == 2


def test_invalid_default_count_exits_with_message(tmp_path):
    catalog = tmp_path / "bad.json"
    catalog.write_text(json.dumps({"functions": [{"name": "f", "remaps": [{"num_default_parameters": "x"}]}]}))
    with pytest.raises(SystemExit, match="invalid 'num_default_parameters'"):
        main([str(catalog), "-o", str(tmp_path / "out")])


def test_missing_catalog_exits_with_message(tmp_path):
    with pytest.raises(SystemExit, match="Cannot read catalog"):
        main([str(tmp_path / "absent.json"), "-o", str(tmp_path / "out")])


def test_rerun_reports_up_to_date(sample_path, tmp_path, capsys):
    main([str(sample_path), "-o", str(tmp_path)])
    capsys.readouterr()

    native = tmp_path / "panda_sample_csharp_wrappers.cpp"
    native.write_text("stale")
    assert main([str(sample_path), "-o", str(tmp_path)]) == 0

    out = capsys.readouterr().out
    assert f"Generated: {native}" in out
    assert f"Up to date: {tmp_path / 'panda_sample_native_methods.cs'}" in out
