import pytest
from eanbits.cli import checksum_is_correct, get_type, main

EAN13_BITS = ("101" + "001100101001110011001010001101110010100111" + "01010" +
              "111001011100101011100101110010001001011100" + "101")


def test_checksum_is_correct():
    assert checksum_is_correct("0000000000000", "EAN-13")
    assert checksum_is_correct("4101450004474", "EAN-13")
    assert checksum_is_correct("697929110035", "UPC-A")
    assert checksum_is_correct("96385074", "EAN-8")
    assert not checksum_is_correct("1234567891234", "EAN-13")
    assert not checksum_is_correct("44444444", "EAN-8")
    assert not checksum_is_correct("458123648745", "UPC-A")
    assert checksum_is_correct("44444444", "EAN-8", return_corrected=True) == "44444440"


def test_get_type():
    assert get_type("9002236311037") == "EAN-13"
    assert get_type("044670012826") == "UPC-A"
    assert get_type("00550246") == "EAN-8"
    assert get_type("51234") == "EAN-5"
    assert get_type("34") == "EAN-2"
    with pytest.raises(ValueError):
        get_type("123ABC")
    with pytest.raises(ValueError):
        get_type("1234")
    with pytest.raises(ValueError):
        get_type("43518432135497")


def test_main_prints_bits(capsys):
    main(["4101450004474"])
    assert capsys.readouterr().out.strip() == EAN13_BITS
    main(["34"])
    assert capsys.readouterr().out.strip() == "10110100001010100011"
    main(["55123457"])
    assert capsys.readouterr().out.strip() == \
        "1010110001011000100110010010011010101000010101110010011101000100101"


def test_main_code39(capsys):
    main(["--code39", "A"])
    assert capsys.readouterr().out.strip() == "100101101101" "0" "110101001011" "0" "100101101101"
    with pytest.raises(SystemExit) as excinfo:
        main(["-c", "a"])
    assert "Invalid character: a" in str(excinfo.value.code)


def test_main_rejects_bad_number():
    with pytest.raises(SystemExit) as excinfo:
        main(["123"])
    assert str(excinfo.value.code).startswith("Error: incorrect barcode number")


def test_main_corrects_checksum(capsys, monkeypatch):
    monkeypatch.setattr("builtins.input", lambda prompt: "y")
    main(["55123450"])
    out = capsys.readouterr().out
    assert "checksum failed" in out
    assert "\"55123457\"" in out
    assert out.strip().splitlines()[-1] == \
        "1010110001011000100110010010011010101000010101110010011101000100101"


def test_main_declines_correction(monkeypatch):
    monkeypatch.setattr("builtins.input", lambda prompt: "N")
    with pytest.raises(SystemExit) as excinfo:
        main(["44444444"])
    assert excinfo.value.code is None
