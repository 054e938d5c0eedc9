from id3_retagger.main import main

main()
