import io
import logging

import pytest

from chainset import ChainSet, DuplicateElement, Setting, concatenate, config
from chainset import filter_out, render, write


def is_odd(value):
    return value % 2 != 0


class TestRender:
    """Tests for render and write."""

    def test_render_trailing_separator(self, ints):
        assert render(ints) == '5 4 23 -56 1 -9 '

    def test_render_empty(self):
        assert render(ChainSet()) == ''

    def test_render_single(self):
        assert render(ChainSet(['Mario'])) == 'Mario '

    def test_render_custom_separator(self, ints):
        Setting.unlock()
        config.render.separator = ','
        try:
            assert render(ints) == '5,4,23,-56,1,-9,'
        finally:
            config.render.separator = ' '
            Setting.lock()

    def test_write_returns_stream(self, names):
        stream = io.StringIO()
        assert write(stream, names) is stream
        assert stream.getvalue() == 'Mario Giovanni Luca Lucia Sara Deborah '


class TestFilterOut:
    """Tests for filter_out."""

    def test_filter_out_odd(self, ints):
        filtered = filter_out(ints, is_odd)
        assert list(filtered) == [4, -56]

    def test_filter_out_size(self, ints):
        filtered = filter_out(ints, is_odd)
        assert filtered.size() == ints.size() - sum(1 for v in ints if is_odd(v))

    def test_filter_out_keeps_source(self, ints):
        filter_out(ints, is_odd)
        assert ints.size() == 6

    def test_filter_out_keeps_predicate(self):
        fold = lambda a, b: a.lower() == b.lower()
        filtered = filter_out(ChainSet(['Mario', 'Luca'], equal=fold), lambda s: len(s) == 5)
        assert filtered.equal is fold

    def test_filter_out_nothing_and_everything(self, ints):
        assert filter_out(ints, lambda v: False) == ints
        assert filter_out(ints, lambda v: True).size() == 0


class TestConcatenate:
    """Tests for concatenate and the + operator."""

    def test_disjoint(self, ints):
        first = ChainSet([1010, -999, 0])
        concat = concatenate(first, ints)
        assert list(concat) == [1010, -999, 0, 5, 4, 23, -56, 1, -9]
        assert concat.size() == first.size() + ints.size()

    def test_operands_untouched(self, ints):
        first = ChainSet([1010])
        first + ints
        assert list(first) == [1010]
        assert ints.size() == 6

    def test_empty_operands(self, ints):
        assert ChainSet() + ints == ints
        assert ints + ChainSet() == ints

    def test_overlap_raises(self, ints):
        with pytest.raises(DuplicateElement) as exc:
            ChainSet([7, -56]) + ints
        assert exc.value.value == -56

    def test_overlap_stops_at_first_clash(self, monkeypatch, ints):
        first = ChainSet([23, 1])
        added = []
        original = ChainSet.add

        def tracking_add(self, value):
            original(self, value)
            added.append(value)

        monkeypatch.setattr(ChainSet, 'add', tracking_add)
        with pytest.raises(DuplicateElement):
            concatenate(first, ints)
        # copy of first, then 5 and 4 merged before the clash on 23
        assert added == [23, 1, 5, 4]

    def test_overlap_is_logged(self, ints, caplog):
        with caplog.at_level(logging.DEBUG, logger='chainset'):
            with pytest.raises(DuplicateElement):
                ChainSet([4]) + ints
        assert 'Concatenation stopped' in caplog.text


if __name__ == '__main__':
    pytest.main([__file__])
