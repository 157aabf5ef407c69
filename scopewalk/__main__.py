"""
    py -m scopewalk -h

will explain all the arguments.
"""
from scopewalk.cmdline import main

main()
