import os

import pytest

from hashstream import (
    HashStreamCipher,
    InvalidInputError,
    encrypt_decrypt,
    encrypt_decrypt_hex,
    transform,
)
from hashstream.cipher_core import stream_cipher
from hashstream.keystream import generate_keystream, keccak256

KEY = b"This is a test key"
LENGTHS = [0, 1, 5, 31, 32, 33, 40, 63, 64, 65, 119, 1000]


def uint256(value):
    return value.to_bytes(32, 'big')


@pytest.mark.parametrize("length", LENGTHS)
def test_length_preservation(length):
    assert len(transform(os.urandom(length), KEY)) == length


@pytest.mark.parametrize("length", LENGTHS)
def test_involution(length):
    data = os.urandom(length)
    assert transform(transform(data, KEY), KEY) == data


def test_determinism():
    data = os.urandom(77)
    assert transform(data, KEY) == transform(data, KEY)
    assert HashStreamCipher().transform(data, KEY) == HashStreamCipher().transform(data, KEY)


@pytest.mark.parametrize("key", [b'', b'k', KEY, os.urandom(100)])
def test_empty_input(key):
    assert transform(b'', key) == b''
    assert encrypt_decrypt_hex(b'', key) == '0x'


def test_key_sensitivity():
    data = b"attack at dawn"
    assert transform(data, b"key one") != transform(data, b"key two")


def test_empty_key_is_accepted():
    data = b"some data"
    assert transform(transform(data, b''), b'') == data


@pytest.mark.parametrize("length", [1, 7, 31, 32])
def test_single_block_exactness(length):
    data = os.urandom(length)
    digest = keccak256(KEY + uint256(0))
    
    expected = bytes(d ^ k for d, k in zip(data, digest))
    assert transform(data, KEY) == expected


def test_multi_block_uses_byte_offset():
    data = os.urandom(40)
    out = transform(data, KEY)
    
    second_block = keccak256(KEY + uint256(32))
    assert out[35] == data[35] ^ second_block[3]
    
    # Not the window index
    wrong_block = keccak256(KEY + uint256(1))
    assert out[32:] != bytes(d ^ k for d, k in zip(data[32:], wrong_block))


def test_zero_data_reveals_keystream():
    out = transform(bytes(64), b'')
    
    assert out[:32].hex() == '290decd9548b62a8d60345a988386fc84ba6bc95484008f6362f93160ef3e563'
    assert out[32:] == keccak256(uint256(32))


def test_short_final_window_is_prefix_of_full_block():
    data = os.urandom(50)
    full = transform(data + bytes(14), KEY)
    assert transform(data, KEY) == full[:50]


def test_bytes_like_inputs():
    data = b"bytes like input"
    expected = transform(data, KEY)
    
    assert transform(bytearray(data), KEY) == expected
    assert transform(memoryview(data), bytearray(KEY)) == expected
    assert isinstance(transform(bytearray(data), KEY), bytes)


@pytest.mark.parametrize("data, key", [
    ("text", KEY),
    (b"data", "text key"),
    ([1, 2, 3], KEY),
    (None, KEY),
    (b"data", 42),
])
def test_invalid_input_types(data, key):
    with pytest.raises(InvalidInputError):
        transform(data, key)


def test_invalid_input_is_a_type_error():
    assert issubclass(InvalidInputError, TypeError)


def test_encrypt_decrypt_aliases():
    cipher = HashStreamCipher()
    data = b"round trip through aliases"
    
    ciphertext = cipher.encrypt(data, KEY)
    assert ciphertext == encrypt_decrypt(data, KEY)
    assert cipher.decrypt(ciphertext, KEY) == data


def test_encrypt_decrypt_hex_keeps_leading_zero_bytes():
    # First keystream byte for the empty key at offset 0 is 0x29
    result = encrypt_decrypt_hex(b'\x29\x0d', b'')
    assert result == '0x0000'
    assert len(encrypt_decrypt_hex(os.urandom(45), KEY)) == 2 + 90


def test_parallel_matches_sequential():
    data = os.urandom(32 * 20 + 7)
    sequential = HashStreamCipher().transform(data, KEY)
    threaded = HashStreamCipher(workers=4, parallel_threshold=2).transform(data, KEY)
    assert threaded == sequential


def test_parallel_below_threshold_runs_sequentially(monkeypatch):
    calls = []
    
    def recording(key, offsets, workers=None):
        calls.append(workers)
        return generate_keystream(key, offsets, workers=workers)
    
    monkeypatch.setattr(stream_cipher, 'generate_keystream', recording)
    cipher = HashStreamCipher(workers=4, parallel_threshold=10)
    
    cipher.transform(bytes(64), KEY)
    cipher.transform(bytes(32 * 10), KEY)
    assert calls == [None, 4]


@pytest.mark.parametrize("kwargs", [{'workers': 0}, {'parallel_threshold': 0}])
def test_invalid_cipher_params(kwargs):
    with pytest.raises(ValueError):
        HashStreamCipher(**kwargs)
