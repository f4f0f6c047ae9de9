"""System usage monitors and the loop that runs them."""