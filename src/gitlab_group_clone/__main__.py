from .cli import main

main(prog_name='gitlab-group-clone')
