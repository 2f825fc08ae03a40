"""Tests for the streaming base64url encoder."""
import pytest

from b64url.core.alphabet import ALPHABET
from b64url.core.encoder import StreamEncoder, encode, encoded_length, iter_encode


class TestEncode:
    """Test suite for one-shot encode."""

    def test_encode_returns_str(self):
        """Test encode returns text."""
        assert isinstance(encode(b"Hello, World!"), str)

    def test_encode_empty_bytes(self):
        """Test encoding empty bytes."""
        assert encode(b"") == ""

    def test_never_padded(self, binary_data):
        """Test no '=' appears for any tail length."""
        for size in range(len(binary_data)):
            assert "=" not in encode(binary_data[:size])

    def test_alphabet_closure(self, binary_data):
        """Test every output symbol belongs to the alphabet."""
        symbols = set(ALPHABET.decode("ascii"))
        for size in range(0, len(binary_data), 7):
            assert set(encode(binary_data[size:])) <= symbols

    @pytest.mark.parametrize("size", range(0, 25))
    def test_encoded_length(self, size):
        """Test output length is ceil(size * 4 / 3)."""
        data = b"\xa5" * size
        expected = -(-size * 4 // 3)

        assert len(encode(data)) == expected
        assert encoded_length(size) == expected

    def test_unused_bits_are_zero(self):
        """Test the last symbol of a partial group carries zero low bits."""
        # 0xff -> 111111 11(0000)
        assert encode(b"\xff") == "_w"
        # 0xff 0xff -> 111111 111111 1111(00)
        assert encode(b"\xff\xff") == "__8"

    def test_accepts_bytes_like(self):
        """Test bytearray and memoryview input."""
        assert encode(bytearray(b"hello")) == "aGVsbG8"
        assert encode(memoryview(b"hello")) == "aGVsbG8"


class TestStreamEncoder:
    """Test suite for StreamEncoder."""

    @pytest.fixture
    def encoder(self):
        """Create encoder instance."""
        return StreamEncoder()

    def test_update_emits_complete_groups_only(self, encoder):
        """Test partial groups stay pending."""
        assert encoder.update(b"he") == b""
        assert encoder.update(b"l") == b"aGVs"
        assert encoder.update(b"lo") == b""
        assert encoder.finalize() == b"bG8"

    def test_finalize_resets(self, encoder):
        """Test the encoder can be reused after finalize."""
        encoder.update(b"a")
        assert encoder.finalize() == b"YQ"
        assert encoder.finalize() == b""
        assert encoder.update(b"abc") + encoder.finalize() == b"YWJj"

    def test_reset_discards_pending(self, encoder):
        """Test reset drops pending bytes."""
        encoder.update(b"ab")
        encoder.reset()
        assert encoder.finalize() == b""

    def test_empty_update(self, encoder):
        """Test empty chunks are harmless."""
        assert encoder.update(b"") == b""
        assert encoder.finalize() == b""

    @pytest.mark.parametrize("chunk_size", [1, 2, 3, 4, 5, 64])
    def test_chunking_independent(self, encoder, binary_data, chunk_size):
        """Test output does not depend on how the input is split."""
        out = b""
        for i in range(0, len(binary_data), chunk_size):
            out += encoder.update(binary_data[i:i + chunk_size])
        out += encoder.finalize()

        assert out.decode("ascii") == encode(binary_data)


class TestIterEncode:
    """Test suite for iter_encode."""

    def test_lazy_chunks(self):
        """Test iter_encode yields as groups complete."""
        chunks = iter(iter_encode([b"hel", b"lo"]))

        assert next(chunks) == b"aGVs"
        assert next(chunks) == b"bG8"
        with pytest.raises(StopIteration):
            next(chunks)

    def test_empty_input(self):
        """Test no chunks for empty input."""
        assert list(iter_encode([])) == []
        assert list(iter_encode([b"", b""])) == []

    def test_generator_input(self, binary_data):
        """Test any iterable of chunks is accepted."""
        chunks = (binary_data[i:i + 10] for i in range(0, len(binary_data), 10))

        assert b"".join(iter_encode(chunks)).decode("ascii") == encode(binary_data)
