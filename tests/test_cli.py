import pytest

from okamoto_uchiyama.cli import main


def test_sum_command(capsys):
    main(["sum", "--bits", "32", "--seed", "cli", "5", "7", "30"])
    out = capsys.readouterr().out
    assert "Decrypted sum: 42" in out


def test_demo_command(capsys):
    main(["demo", "--bits", "32", "--seed", "cli"])
    out = capsys.readouterr().out
    assert "Dec(Enc(42)) = 42" in out
    assert "Dec(Enc(5) * Enc(7)) = 12" in out


def test_keygen_command(capsys):
    main(["keygen", "--bits", "32", "--seed", "cli"])
    out = capsys.readouterr().out
    assert "n = " in out
    assert "h = " in out


def test_error_exits_nonzero(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["sum", "--bits", "8", "1"])
    assert exc.value.code == 1
    assert "ERROR" in capsys.readouterr().out


def test_sum_prints_plaintext_bound(capsys):
    main(["sum", "--bits", "32", "--seed", "cli", "1", "2"])
    out = capsys.readouterr().out
    assert "sums must stay below p" in out
    assert "reduced mod p" not in out


def test_sum_warns_when_total_reaches_p(capsys):
    # 16-bit primes are below 65536
    main(["sum", "--bits", "32", "--seed", "cli", "40000", "40000"])
    out = capsys.readouterr().out
    assert "WARNING" in out
    assert "reduced mod p" in out
    assert "Decrypted sum: 80000" not in out
