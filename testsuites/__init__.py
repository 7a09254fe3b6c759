"""
Test suites package.

Kept importable so test modules can share helpers through absolute imports
(`from testsuites.unit.fakes import FakePage`) and so `run_tests.py` can
address suites by path.
"""
