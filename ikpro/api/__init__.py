# -*- coding: utf-8 -*-
"""İKPro REST API (FastAPI)."""
