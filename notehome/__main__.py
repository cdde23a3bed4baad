from notehome.main import main

main()
