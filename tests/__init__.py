"""Test suite for easekit."""
