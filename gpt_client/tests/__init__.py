"""Test suite for gpt_client."""
