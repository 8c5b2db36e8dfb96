from argflags.cli import main

main()
