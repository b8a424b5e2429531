from graphwalk.cli import main

main()
