"""Tests for the pygaggiuino package."""
