# -*- coding: utf-8 -*-
"""İKPro başlatıcı.

Logging'i yapılandırır ve REST API sunucusunu başlatır.
"""

import sys

from ikpro.cli import main

if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
