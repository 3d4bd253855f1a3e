#!/usr/bin/env python3
"""
Markdown → HTML 변환기 실행 스크립트
"""

import sys

from mdhtml.cli import main

if __name__ == "__main__":
    sys.exit(main())
