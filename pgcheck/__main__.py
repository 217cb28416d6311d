from pgcheck.main import main

main()
