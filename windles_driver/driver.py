import time
import os.path as osp
import sys


ALL_ACTIONS = ("run", "params")
help_msg = """
Available commands:

    run      run windles with a specified params file
    params   print the default parameters

Type windles <command> --help for usage help on a specific command.
For example, windles run --help will list all running options.
"""
### Print the help message ###
def print_usage():
    print("Usage: %s <command> <options> <arguments>"
          % osp.basename(sys.argv[0]))
    print(help_msg)

### Pop first argument, check it is a valid action. ###
def get_action():
    if len(sys.argv) <= 1:
        print_usage()
        sys.exit(1)
    if not sys.argv[1] in ALL_ACTIONS:
        if sys.argv[1] == "--help":
            print_usage()
            sys.exit(0)
        else:
            print_usage()
            sys.exit(1)
    return sys.argv.pop(1)

### Run the driver ###
def run_action(params_loc=None, argv=None):
    tick = time.time()

    from .driver_functions import SetupSimulation

    ### Setup everything ###
    params, solver = SetupSimulation(params_loc, argv)

    ### run the solver ###
    solver.Solve()

    tock = time.time()
    runtime = tock-tick
    print("Run Complete: {:1.2f} s".format(runtime))

    return runtime

def params_action(params_loc=None, argv=None):
    import windles
    windles.windles_parameters.Read()

def main():
    actions = {"run":    run_action,
               "params": params_action}
    actions[get_action()]()

if __name__ == "__main__":
    main()
