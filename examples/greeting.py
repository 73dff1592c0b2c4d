"""respack Example - From Translation Documents to Runtime Lookup.

Demonstrates the full build-time and run-time workflow on a small locale
tree written to a temporary directory.

Scenarios covered:
1. Generating resource identifiers and packing every language
2. Resolving identifiers through a Domain bound to VERSION_HASH
3. Layering a patch pack over a base pack
4. Detecting tables packed against stale identifiers

In a real project the two tool invocations run from the command line
(respack-genids, respack-pack) and the generated module is imported
normally; here they are driven from Python so the example is self-contained.

Python 3.13+.
"""

from __future__ import annotations

import importlib.util
import json
import tempfile
from pathlib import Path
from types import ModuleType

from respack import Domain, VersionHashMismatchError
from respack.cli import genids, pack

DOCUMENTS = {
    "en": {
        "Greeting": "Hello!",
        "GreetingWithName": "Hello, {name}!",
        "Farewell": "Goodbye!",
    },
    "et": {
        "Greeting": "Tere!",
        "GreetingWithName": "Tere, {name}!",
    },
}


def _write_documents(locales: Path) -> list[Path]:
    locales.mkdir(parents=True, exist_ok=True)
    paths = []
    for lang, strings in DOCUMENTS.items():
        path = locales / f"{lang}.json"
        path.write_text(
            json.dumps({"lang": lang, "strings": strings}, ensure_ascii=False), encoding="utf-8"
        )
        paths.append(path)
    return paths


def _import_resid(path: Path) -> ModuleType:
    spec = importlib.util.spec_from_file_location("resid", path)
    if spec is None or spec.loader is None:
        msg = f"cannot import {path}"
        raise ImportError(msg)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def example_1_build(root: Path) -> ModuleType:
    """Example 1: Generate identifiers, then pack each language."""
    print("=" * 60)
    print("Example 1: Build Step")
    print("=" * 60)

    documents = _write_documents(root / "locales")
    resid_path = root / "resid.py"

    genids.main(["-o", str(resid_path), str(root / "locales")])
    pack.main(["--ids", str(resid_path), *(str(p) for p in documents)])

    print("\nGenerated module:")
    print(resid_path.read_text(encoding="utf-8"))
    return _import_resid(resid_path)


def example_2_lookup(root: Path, resid: ModuleType) -> Domain:
    """Example 2: Load packed tables and resolve identifiers."""
    print("\n" + "=" * 60)
    print("Example 2: Runtime Lookup")
    print("=" * 60)

    domain = Domain(resid.VERSION_HASH)
    summary = domain.load_all([root / "locales" / "en.pak.json", root / "locales" / "et.pak.json"])
    print(f"\n{summary!r}")

    for lang in domain.languages:
        strings = domain.language(lang)
        greeting = strings.string(resid.GreetingWithName).format(name="Anna")
        farewell = strings.string(resid.Farewell) or "[no translation]"
        print(f"  {lang}: {strings.string(resid.Greeting)} | {greeting} | {farewell}")
    return domain


def example_3_patch_pack(root: Path, resid: ModuleType, domain: Domain) -> None:
    """Example 3: A patch pack fills gaps without erasing the base pack."""
    print("\n" + "=" * 60)
    print("Example 3: Patch Pack")
    print("=" * 60)

    patches = root / "patches"
    patches.mkdir()
    patch = patches / "et.json"
    patch.write_text(
        json.dumps({"lang": "et", "strings": {"Farewell": "Head aega!"}}, ensure_ascii=False),
        encoding="utf-8",
    )
    pack.main(["--ids", str(root / "resid.py"), str(patch)])
    domain.load_strings(patches / "et.pak.json")

    et = domain.language("et")
    print(f"\n  Greeting: {et.string(resid.Greeting)}")
    print(f"  Farewell: {et.string(resid.Farewell)}")


def example_4_drift(root: Path) -> None:
    """Example 4: Tables packed against other identifiers are rejected."""
    print("\n" + "=" * 60)
    print("Example 4: Identifier Drift")
    print("=" * 60)

    domain = Domain("0" * 40)
    try:
        domain.load_strings(root / "locales" / "en.pak.json")
    except VersionHashMismatchError as e:
        print(f"\n  Rejected: {e}")
        print(f"  expected {e.expected}, table has {e.actual}")
    print(f"  Loaded languages: {list(domain.languages)}")


if __name__ == "__main__":
    with tempfile.TemporaryDirectory() as tmp_dir:
        tmp_root = Path(tmp_dir)
        resid_module = example_1_build(tmp_root)
        loaded = example_2_lookup(tmp_root, resid_module)
        example_3_patch_pack(tmp_root, resid_module, loaded)
        example_4_drift(tmp_root)

    print("\n" + "=" * 60)
    print("[SUCCESS] All examples complete!")
    print("=" * 60)
