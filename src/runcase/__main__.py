from runcase.cli import main

main()
