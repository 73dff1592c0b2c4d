"""Tests for the respack-pack entry point."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path

import pytest

from respack.cli.pack import main
from respack.codegen import write_resid_module
from respack.identifiers import compute_version_hash


@pytest.fixture
def resid(tmp_path: Path) -> Path:
    path = tmp_path / "resid.py"
    write_resid_module(path, ["Farewell", "Greeting"])
    return path


class TestMain:
    def test_packs_each_document(
        self,
        resid: Path,
        write_doc: Callable[..., Path],
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        en = write_doc("en.json", "en", {"Greeting": "Hello", "Farewell": "Bye"})
        et = write_doc("et.json", "et", {"Greeting": "Tere"})

        assert main(["--ids", str(resid), str(en), str(et)]) == 0

        packed = json.loads(en.with_name("et.pak.json").read_text(encoding="utf-8"))
        assert packed == {
            "Lang": "et",
            "VersionHash": compute_version_hash(["Farewell", "Greeting"]),
            "Strings": ["", "Tere"],
        }
        assert en.with_name("en.pak.json").is_file()
        assert "respack-pack: Packed" in capsys.readouterr().err

    def test_continues_after_failure(
        self,
        resid: Path,
        tmp_path: Path,
        write_doc: Callable[..., Path],
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        stale = write_doc("de.json", "de", {"Welcome": "Willkommen"})
        broken = tmp_path / "fr.json"
        broken.write_text("[", encoding="utf-8")
        good = write_doc("et.json", "et", {"Greeting": "Tere"})

        assert main(["--ids", str(resid), str(stale), str(broken), str(good)]) == 1

        assert good.with_name("et.pak.json").is_file()
        assert not stale.with_name("de.pak.json").exists()
        err = capsys.readouterr().err
        assert f"error creating pack for '{stale}': no resource ID for name 'Welcome'" in err
        assert f"error creating pack for '{broken}': could not read language file" in err
        assert "2 of 3 documents failed to pack" in err

    def test_continues_after_undecodable_document(
        self,
        resid: Path,
        tmp_path: Path,
        write_doc: Callable[..., Path],
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        latin1 = tmp_path / "de.json"
        latin1.write_bytes(b'{"lang":"de","strings":{"Greeting":"\xff"}}')
        good = write_doc("et.json", "et", {"Greeting": "Tere"})

        assert main(["--ids", str(resid), str(latin1), str(good)]) == 1

        assert good.with_name("et.pak.json").is_file()
        assert not latin1.with_name("de.pak.json").exists()
        err = capsys.readouterr().err
        assert f"error creating pack for '{latin1}'" in err
        assert "invalid UTF-8" in err

    def test_ids_module_nested_too_deeply(
        self,
        tmp_path: Path,
        write_doc: Callable[..., Path],
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        resid = tmp_path / "resid.py"
        resid.write_text("Greeting: int = " + " + ".join(["0"] * 500) + "\n", encoding="utf-8")
        doc = write_doc("en.json", "en", {"Greeting": "Hello"})

        assert main(["--ids", str(resid), str(doc)]) == 1
        assert "no value for constant 'Greeting'" in capsys.readouterr().err

    def test_always_exit_zero(
        self, resid: Path, write_doc: Callable[..., Path]
    ) -> None:
        stale = write_doc("de.json", "de", {"Welcome": "Willkommen"})
        assert main(["--always-exit-zero", "--ids", str(resid), str(stale)]) == 0

    def test_unreadable_ids(
        self,
        tmp_path: Path,
        write_doc: Callable[..., Path],
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        doc = write_doc("en.json", "en", {"Greeting": "Hello"})
        assert main(["--ids", str(tmp_path / "missing.py"), str(doc)]) == 1
        assert "error reading resource IDs" in capsys.readouterr().err
        assert not doc.with_name("en.pak.json").exists()

    def test_verify_rejects_edited_module(
        self,
        tmp_path: Path,
        write_doc: Callable[..., Path],
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        resid = tmp_path / "resid.py"
        write_resid_module(resid, ["Greeting"])
        with resid.open("a", encoding="utf-8") as f:
            f.write("Zed: Final[int] = 1\n")
        doc = write_doc("en.json", "en", {"Greeting": "Hello"})

        assert main(["--ids", str(resid), str(doc)]) == 0
        assert main(["--verify", "--ids", str(resid), str(doc)]) == 1
        assert "version hash does not match" in capsys.readouterr().err

    def test_warns_about_language_tags(
        self,
        resid: Path,
        write_doc: Callable[..., Path],
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        untagged = write_doc("a.json", "", {"Greeting": "Hello"})
        typo = write_doc("b.json", "xx", {"Greeting": "Hello"})
        assert main(["--ids", str(resid), str(untagged), str(typo)]) == 0
        err = capsys.readouterr().err
        assert "document has no language tag" in err
        assert "Unknown language tag 'xx'" in err

    def test_default_ids_path(
        self,
        tmp_path: Path,
        resid: Path,
        write_doc: Callable[..., Path],
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        doc = write_doc("en.json", "en", {"Greeting": "Hello"})
        monkeypatch.chdir(tmp_path)
        assert main([str(doc)]) == 0
