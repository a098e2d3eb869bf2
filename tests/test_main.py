"""Tests for the command-line entry point and quality metrics."""

import math

import numpy as np
import pytest

import main
from utils.image_io import load_image
from utils.metrics import Timer, compute_psnr_ssim
from utils.test_images import DEMO_IMAGES, generate_demo_image


def test_synthetic_writes_every_demo_image(tmp_path):
    """Each demo image is written and reads back unchanged."""
    main.main(['--synthetic', str(tmp_path / 'demo')])
    for key in DEMO_IMAGES:
        ext = 'ppm' if key == 'static' else 'png'
        loaded = load_image(tmp_path / 'demo' / f"{key}.{ext}")
        assert loaded == generate_demo_image(key)


def test_unknown_demo_image():
    assert generate_demo_image('nebula') is None


def test_script_flag_runs_file(tmp_path, capsys):
    script = tmp_path / 'commands.txt'
    script.write_text(f"load {tmp_path / 'missing.ppm'} img\nexit\n")
    main.main(['--script', str(script)])
    assert 'missing.ppm' in capsys.readouterr().out


def test_script_flag_rejects_bad_file(tmp_path):
    with pytest.raises(SystemExit) as exc:
        main.main(['--script', str(tmp_path / 'commands.sh')])
    assert exc.value.code == 1


def test_bad_arguments_print_usage(capsys):
    with pytest.raises(SystemExit) as exc:
        main.main(['--frobnicate'])
    assert exc.value.code == 2
    assert 'Usage' in capsys.readouterr().out


def test_identical_images_have_infinite_psnr(random_image):
    quality = compute_psnr_ssim(random_image.pixels, random_image.pixels)
    assert math.isinf(quality['psnr_rgb'])
    assert quality['ssim_rgb'] == pytest.approx(1.0)


def test_small_images_skip_ssim(static_image):
    darker = np.clip(static_image.pixels.astype(int) - 10, 0, 255)
    quality = compute_psnr_ssim(static_image.pixels, darker)
    assert math.isnan(quality['ssim_y'])
    assert 20 < quality['psnr_rgb'] < 40


def test_timer_returns_result():
    timer = Timer()
    assert timer.measure(sum, [1, 2, 3]) == 6
    assert timer.elapsed_ms >= 0
