"""
Tests package for the RSA puncturable PRF

- Unit tests: individual modules in isolation
- Integration tests: complete PRF lifecycles and the benchmark harness
"""
