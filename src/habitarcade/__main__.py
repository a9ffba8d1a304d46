from habitarcade.main import main

main()
