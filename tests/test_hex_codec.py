import pytest

from hashstream.encoding import from_hex, text_to_bytes, to_hex


def test_to_hex_two_digits_per_byte():
    assert to_hex(b'') == '0x'
    assert to_hex(b'\x00\x01\xff') == '0x0001ff'


@pytest.mark.parametrize("text", ['0x0001ff', '0X0001FF', '0001ff', '  0x0001ff\n'])
def test_from_hex_accepts_prefix_and_case(text):
    assert from_hex(text) == b'\x00\x01\xff'


def test_from_hex_empty():
    assert from_hex('0x') == b''
    assert from_hex('') == b''


@pytest.mark.parametrize("text", ['0x123', '0xzz', 'hello'])
def test_from_hex_rejects_malformed(text):
    with pytest.raises(ValueError):
        from_hex(text)


def test_text_to_bytes_is_utf8():
    assert text_to_bytes('Lorem') == b'Lorem'
    assert text_to_bytes('é') == b'\xc3\xa9'
