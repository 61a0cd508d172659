from fractalgarden.main import main

main()
