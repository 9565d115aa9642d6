from cmdflags.cli import main

main()
