"""Tests for sc-parser."""
