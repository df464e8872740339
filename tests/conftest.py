from __future__ import annotations

import os

# ``newsbrief.api.app`` builds its application at import time and refuses to
# start without a provider credential.
os.environ.setdefault("OPENAI_API_KEY", "test-key")
