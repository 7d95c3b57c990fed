from dingus.cli import main

main()
