# 简介：包运行入口（python -m srcnorm），转发到 .cli.main。
from .cli import main
import sys


if __name__ == "__main__":
    sys.exit(main())
