# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Run the builder demo: python -m genro_patterns."""

from genro_patterns.demo import main

if __name__ == "__main__":
    main()
