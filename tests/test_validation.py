"""Tests for clipsplit.validation module."""

import subprocess
from pathlib import Path

import pytest

from clipsplit.exceptions import DependencyError, ManifestError, ValidationError
from clipsplit.validation import check_ffmpeg, validate_inputs


class TestCheckFfmpeg:
    def test_missing_ffmpeg_raises(self, monkeypatch):
        monkeypatch.setattr("clipsplit.validation.shutil.which", lambda name: None)
        with pytest.raises(DependencyError) as exc_info:
            check_ffmpeg()
        assert exc_info.value.dependency == "ffmpeg"
        assert exc_info.value.install_hint

    def test_reads_version(self, monkeypatch):
        monkeypatch.setattr("clipsplit.validation.shutil.which", lambda name: "/usr/bin/ffmpeg")

        def fake_run(cmd, **kwargs):
            return subprocess.CompletedProcess(
                cmd, 0, stdout="ffmpeg version 6.1.1 Copyright (c) 2000-2023\n"
            )

        monkeypatch.setattr("clipsplit.validation.subprocess.run", fake_run)
        assert check_ffmpeg() == "6.1.1"

    def test_unreadable_version(self, monkeypatch):
        monkeypatch.setattr("clipsplit.validation.shutil.which", lambda name: "/usr/bin/ffmpeg")

        def fake_run(cmd, **kwargs):
            return subprocess.CompletedProcess(cmd, 0, stdout="")

        monkeypatch.setattr("clipsplit.validation.subprocess.run", fake_run)
        assert check_ffmpeg() == "unknown"


class TestValidateInputs:
    def test_valid_files(self, tmp_path):
        manifest = tmp_path / "clips.txt"
        manifest.write_text("header\n")
        audio = tmp_path / "in.wav"
        audio.write_bytes(b"fake")
        validate_inputs(manifest, audio)

    def test_missing_manifest(self, tmp_path):
        audio = tmp_path / "in.wav"
        audio.write_bytes(b"fake")
        with pytest.raises(ManifestError):
            validate_inputs(tmp_path / "clips.txt", audio)

    def test_missing_audio(self, tmp_path):
        manifest = tmp_path / "clips.txt"
        manifest.write_text("header\n")
        with pytest.raises(ValidationError):
            validate_inputs(manifest, tmp_path / "in.wav")

    def test_audio_is_directory(self, tmp_path):
        manifest = tmp_path / "clips.txt"
        manifest.write_text("header\n")
        with pytest.raises(ValidationError):
            validate_inputs(manifest, Path(tmp_path))
