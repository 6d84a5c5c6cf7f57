import sys

from joint_account.cli import main

sys.exit(main())
