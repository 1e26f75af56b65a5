import pytest

from collectionlab.caesar import DEMO_PLAINTEXT, decrypt, encrypt, main

MESSAGE = "Off to the bunker. Every person for themselves"
CIPHERTEXT = "Ypp dy dro lexuob. Ofobi zobcyx pyb drowcovfoc"


def test_encrypt_documented_example():
    assert encrypt(MESSAGE, 10) == CIPHERTEXT


def test_decrypt_documented_example():
    assert decrypt(CIPHERTEXT, 10) == MESSAGE


@pytest.mark.parametrize("shift", [0, 1, 3, 13, 25, 26])
def test_round_trip(shift):
    assert decrypt(encrypt(DEMO_PLAINTEXT, shift), shift) == DEMO_PLAINTEXT


def test_non_letters_unchanged():
    text = "123 !? ü"
    assert encrypt(text, 5) == text


def test_case_preserved():
    result = encrypt("AbC", 7)
    assert [c.isupper() for c in result] == [True, False, True]


def test_full_alphabet_shift_is_identity():
    assert encrypt(MESSAGE, 26) == MESSAGE


def test_decrypt_rejects_large_shift():
    with pytest.raises(ValueError):
        decrypt("abc", 27)


def test_encrypt_rejects_negative_shift():
    with pytest.raises(ValueError):
        encrypt("abc", -1)


def test_main_encrypt(capsys):
    assert main(["--message", MESSAGE, "--encrypt", "--shift", "10"]) == 0
    assert capsys.readouterr().out == CIPHERTEXT + "\n"


def test_main_decrypt(capsys):
    main(["-m", CIPHERTEXT, "-d", "-s", "10"])
    assert capsys.readouterr().out == MESSAGE + "\n"


def test_main_without_mode(capsys):
    main(["-m", "hello"])
    assert capsys.readouterr().out == "Please specify either --encrypt or --decrypt\n"


def test_main_demo(capsys):
    main([])
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == f"Plaintext: {DEMO_PLAINTEXT}"
    assert lines[2] == f"Decrypted text: {DEMO_PLAINTEXT}"