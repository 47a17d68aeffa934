"""Tests for the command-line demonstration program."""

from __future__ import annotations

import yaml

from scripts.run_demo import main


def _write_config(path, method: str, gap: dict, similarity: dict | None = None):
    payload = {"scoring": {"method": method, "gap": gap}}
    if similarity is not None:
        payload["scoring"]["similarity"] = similarity
    path.write_text(yaml.safe_dump(payload), encoding="utf-8")
    return path


def test_default_demo_prints_readme_example(capsys):
    """Without arguments the README pair is aligned with the default config."""
    main([])
    out = capsys.readouterr().out.splitlines()

    assert out[:3] == [
        "CHOCOLATEISTH--EANSWER",
        "     ||||  ||         ",
        "-----LATE--THAW-------",
    ]
    assert out[-1] == "waterman_smith_beyer score: 4.4375"


def test_inline_sequences_with_config(tmp_path, capsys):
    config = _write_config(
        tmp_path / "nw.yaml", "needleman_wunsch", {"kind": "linear", "per_unit": 2}
    )

    main(["AAGDAXSFXAF", "GDSXFF", "--config", str(config)])
    out = capsys.readouterr().out.splitlines()

    assert out[0] == "AAGDAXSFXAF"
    assert out[2] == "--GD--S-XFF"
    assert out[-1] == "needleman_wunsch score: -6"


def test_fasta_input_and_method_override(tmp_path, capsys):
    config = _write_config(
        tmp_path / "sw.yaml",
        "needleman_wunsch",
        {"kind": "linear", "per_unit": 1},
        {"kind": "binary", "match": 2, "mismatch": -2},
    )
    fasta_path = tmp_path / "pair.fa"
    fasta_path.write_text(">s\nAAGDAXSFXAF\n>t\nGDSXFF\n", encoding="utf-8")

    main(["--fasta", str(fasta_path), "--config", str(config), "-m", "smith_waterman"])
    out = capsys.readouterr().out.splitlines()

    assert out[0] == "AAGDAXSFXAF-"
    assert out[2] == "--GD--S-X-FF"
    assert out[-1] == "smith_waterman score: 6"
