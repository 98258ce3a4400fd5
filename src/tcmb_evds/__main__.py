# src/tcmb_evds/__main__.py
import sys

from tcmb_evds.app import main

sys.exit(main())
