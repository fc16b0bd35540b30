import os
import tempfile

# keep settings written during tests out of the real home directory
os.environ.setdefault("PASSGAUGE_HOME", tempfile.mkdtemp(prefix="passgauge-test-"))
