# SPDX-License-Identifier: MIT
# Copyright (c) 2026 LlamaIndex Inc.

from lrucache import main

if __name__ == "__main__":
    main()
