import sys

from function_client.invoke_function import main

sys.exit(main())
