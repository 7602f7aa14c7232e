"""Test helper modules for the depboot test suite.

- vendor_env: throwaway libraries with a manifest, marker files and a fake
  pip runner
"""
