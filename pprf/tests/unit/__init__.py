"""
Unit tests for puncturable PRF components

- test_primes.py: odd prime enumeration
- test_puncture_set.py: puncture bitset bookkeeping
- test_accumulator.py: accumulator arithmetic
- test_hashing.py: hash algorithm selection
- test_rsa_params.py: modulus and generator generation
- test_models.py: persisted state record
- test_config.py: environment settings
- test_prf.py: eval, punc, counting queries and repr
"""
