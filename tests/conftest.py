import os
import sys

# Keep tests independent of the host environment's quota warning settings
for _key in [k for k in os.environ if k.startswith("QUOTA_WARNING_")]:
    del os.environ[_key]

# Add src directory to Python path
sys.path.insert(0, os.path.join(os.path.dirname(os.path.dirname(__file__)), "src"))
