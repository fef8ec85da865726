import ezdxf

from splicer.cli import main


def test_writes_drawing(sample_path, tmp_path):
    output = tmp_path / "splice.dxf"
    assert main([str(sample_path), str(output)]) == 0

    doc = ezdxf.readfile(output)
    assert len(doc.modelspace().query("CIRCLE")) == 28


def test_bad_input_exits_non_zero(tmp_path, capsys):
    output = tmp_path / "splice.dxf"
    assert main([str(tmp_path / "missing.toml"), str(output)]) == 1
    assert "error: Cannot read" in capsys.readouterr().err
    assert not output.exists()


def test_unwritable_output_exits_non_zero(sample_path, tmp_path, capsys):
    output = tmp_path / "no" / "such" / "dir" / "splice.dxf"
    assert main([str(sample_path), str(output)]) == 1
    assert "Cannot save" in capsys.readouterr().err
