from rubyswitch import main

main()
