import windles_driver.driver_functions as df

#####################################


### Load the parameters from file ###
# windles.initialize("params.yaml")
# params = windles.windles_parameters


### Manually define the parameters ###
### Create an default parameter set ###
params = df.BlankParameters()

### Edit the general settings ###
params["general"]["name"]      = "grid_driver"
params["general"]["plot_farm"] = True

### Edit the domain settings ###
params["domain"]["xsize"] = 3000.0
params["domain"]["ysize"] = 1500.0
params["domain"]["zsize"] = 400.0
params["domain"]["itot"]  = 150
params["domain"]["jtot"]  = 75
params["domain"]["ktot"]  = 20

### Edit the windfarm settings ###
params["windfarm"]["nturbrows"]   = 3
params["windfarm"]["nturbcols"]   = 4
params["windfarm"]["spacingx"]    = 5.0
params["windfarm"]["spacingy"]    = 3.0
params["windfarm"]["swstaggered"] = True
params["windfarm"]["farmlocx"]    = 300.0
params["windfarm"]["farmlocy"]    = 350.0

### Edit the turbine settings
params["turbine"]["diam"]     = 126.0
params["turbine"]["hhub"]     = 90.0
params["turbine"]["ct"]       = 0.75
params["turbine"]["cp"]       = 0.45
params["turbine"]["tsr"]      = 8.0
params["turbine"]["swdynyaw"] = True
params["turbine"]["yawperiod"] = 30.0

### Edit the inflow and solver settings ###
params["inflow"]["type"]         = "power"
params["inflow"]["inflow_angle"] = 0.1
params["solver"]["end_time"]     = 1200.0

### Initialize the parameters object ###
params = df.Initialize(params)

### Build the grid, flow fields and wind-farm ###
grid, fields, inflow = df.BuildDomain(params)
farm = df.BuildFarm(params, grid, fields)

### Build the solver and run ###
solver = df.BuildSolver(params, grid, fields, inflow, farm)
solver.Solve()
