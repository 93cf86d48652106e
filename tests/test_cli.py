import json

import cv2

from colour_remover.image import PixelBuffer, load_image, save_image

import main


def _write_settings(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"mode": "extract"}), encoding="utf-8")
    return str(path)


def test_cli_processes_folder(tmp_path):
    src = tmp_path / "images"
    src.mkdir()
    buf = PixelBuffer.filled(6, 6, (255, 255, 255))
    for y in range(1, 5):
        buf.set(2, y, (0, 0, 0))
    save_image(buf, src / "bar.png")
    out_dir = tmp_path / "out"

    code = main._cli([str(src), "0,0,0", "4", "--out", str(out_dir), "--config", _write_settings(tmp_path), "-q"])

    assert code == 0
    assert load_image(out_dir / "bar.png").mask_of((255, 255, 255)).all()
    assert load_image(out_dir / "bar_s.png").mask_of((0, 0, 0)).sum() == 4


def test_cli_rejects_bad_colour(tmp_path, capsys):
    code = main._cli([str(tmp_path), "0,0", "4", "--config", _write_settings(tmp_path)])
    assert code == 2
    assert "R,G,B" in capsys.readouterr().out


def test_cli_reports_empty_folder(tmp_path, capsys):
    code = main._cli([str(tmp_path), "0,0,0", "4", "--out", str(tmp_path / "out"), "--config", _write_settings(tmp_path)])
    assert code == 1
    assert "No image files found" in capsys.readouterr().out


def test_cli_no_keep_alpha_overrides_config(tmp_path):
    src = tmp_path / "images"
    src.mkdir()
    save_image(PixelBuffer.filled(3, 3, (255, 255, 255)), src / "plain.png")
    settings = tmp_path / "alpha.json"
    settings.write_text(json.dumps({"mode": "erase", "keep_alpha": True}), encoding="utf-8")

    rgba_out = tmp_path / "rgba"
    rgb_out = tmp_path / "rgb"
    assert main._cli([str(src), "0,0,0", "1", "--out", str(rgba_out), "--config", str(settings), "-q"]) == 0
    assert main._cli([str(src), "0,0,0", "1", "--out", str(rgb_out), "--config", str(settings), "--no-keep-alpha", "-q"]) == 0

    assert cv2.imread(str(rgba_out / "plain.png"), cv2.IMREAD_UNCHANGED).shape == (3, 3, 4)
    assert cv2.imread(str(rgb_out / "plain.png"), cv2.IMREAD_UNCHANGED).shape == (3, 3, 3)
