from movieStore.main import main

main()
