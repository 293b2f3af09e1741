from bwgraph.cli import main

main()
