from kayscan.demo import main

main()
