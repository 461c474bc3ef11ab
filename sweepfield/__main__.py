from sweepfield.main import main

main()
