"""Tests for holiday category normalization."""
import pytest

from holiday_checker.core.categories import css_class, normalize_type


class TestNormalizeType:
    """Test cases for normalize_type()."""

    @pytest.mark.parametrize('tags,expected', [
        (['National holiday'], 'National'),
        (['Local holiday'], 'Local'),
        (['observance'], 'Observance'),
        (['Common local holiday'], 'Local'),
        (['Regional Festival'], 'Regional Festival'),
        (['Season'], 'Season'),
    ])
    def test_first_tag(self, tags, expected):
        assert normalize_type(tags) == expected

    def test_empty_and_missing(self):
        assert normalize_type([]) == 'Holiday'
        assert normalize_type(None) == 'Holiday'

    def test_only_first_tag_counts(self):
        assert normalize_type(['Observance', 'National holiday']) == 'Observance'

    def test_national_rule_wins_over_local(self):
        assert normalize_type(['National and local holiday']) == 'National'


def test_css_class():
    assert css_class('National') == 'national'
    assert css_class('Regional Festival') == 'regional-festival'
