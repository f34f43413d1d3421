"""支持 python -m autodocker"""

from .cli import main

main()
