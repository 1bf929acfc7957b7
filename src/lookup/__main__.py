from lookup.cli import main

main()
