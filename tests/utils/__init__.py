"""Tests for utility modules.

Test Files and Coverage:
========================

| Test File          | Test Classes                | Tested Constructs                 | Tested Functionalities                     |
|--------------------|-----------------------------|-----------------------------------|--------------------------------------------|
| test_walker.py     | FileContextTest, WalkTest   | FileContext, walk()               | Lazy stat, relative paths, recursion, errors|
| test_hashing.py    | ComputeDigestTest           | compute_digest(), HASH_ALGORITHMS | Chunk independence, handle release, errors |
| test_profiling.py  | ProfilingTest               | profile_function(), profile_main()| Env toggle, filenames, stats dump          |
"""
