import sys

from RowReductionLab.main import main

sys.exit(main())
