import sys

from bikecalc.cli import main

# 4.8 km climb at 8.125% in the drops
sys.exit(main(sys.argv[1:] or ['--d', '4800', '--gr', '8.125', '--p', '389.9', '--cda', '0.310', '--mr', '67']))
