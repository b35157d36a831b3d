import os

# Tests run against an empty store unless a test seeds one explicitly.
os.environ.setdefault("SEED_DEMO_ORDERS", "false")
os.environ.setdefault("LOG_SAMPLE_2XX", "1")
