from devtimer.main import main

main()
